"""Skills reutilizables del backend de jjugg."""
