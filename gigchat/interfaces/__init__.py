"""Interface adapters exposing the use cases."""
