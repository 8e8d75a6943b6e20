"""Domain layer: entities and the ports used to reach external stores."""
