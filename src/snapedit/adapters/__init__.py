"""Collaborators and front ends layered over the buffer core."""
