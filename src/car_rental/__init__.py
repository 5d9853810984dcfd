"""Car rental pricing demo."""

from car_rental.version import __app_name__, __version__

__all__ = ["__app_name__", "__version__"]
