"""Site configuration for podsite."""
