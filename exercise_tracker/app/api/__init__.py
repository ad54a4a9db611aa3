"""HTTP routers for the Exercise Tracker API."""
