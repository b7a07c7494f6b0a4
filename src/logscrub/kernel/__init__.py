"""Kernel – error hierarchy and security defaults shared by every layer."""
