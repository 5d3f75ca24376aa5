"""Application layer - write loops driving the throttle."""
