"""Golf round scoring and side-wager settlement."""
