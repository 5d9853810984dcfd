"""Business services for CarRental."""
