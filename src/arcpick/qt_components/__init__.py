"""PyQt6 widgets hosting arcpick controllers."""
