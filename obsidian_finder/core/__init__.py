"""Core note repository operations. Every function takes the vault explicitly."""
