"""Development backend for the question page client."""
