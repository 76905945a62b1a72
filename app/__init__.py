"""Console front end for the Marina Boat Manager."""
