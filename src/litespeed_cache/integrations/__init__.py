"""Host framework integrations for litespeed_cache."""
