"""Constants shared across hashfiles modules."""
