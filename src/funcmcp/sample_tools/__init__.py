"""Sample tool package served when no configuration is given."""
