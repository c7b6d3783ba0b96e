"""Surfaces that drive an editor session."""
