"""MonoLogger statistics dashboard backend."""
