"""Teaching warm-ups: a call-stack story, a stack-overflow hunt, a fire simulation and console helpers."""

__version__ = "0.1.0"