"""Process-wide services shared by the editor layers."""
