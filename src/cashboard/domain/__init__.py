"""Domain layer: board model, account references and ports."""
