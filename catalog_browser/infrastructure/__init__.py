"""Configuration, logging and the remote catalog client."""
