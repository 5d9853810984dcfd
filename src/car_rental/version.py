"""Version metadata for CarRental."""

__app_name__ = "CarRental"
__company__ = "Locadora Demo"
__version__ = "0.1.0"
