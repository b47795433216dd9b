"""HTTP adapter exposing the engine to the wizard front end."""
