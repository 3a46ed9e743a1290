"""Pure domain logic: models, label composition and family generators."""
