"""Group chat participant resolution and mention notifications for gig events."""
