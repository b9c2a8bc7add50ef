"""Built-in critter species and the species protocol."""
