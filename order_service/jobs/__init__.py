"""Batch jobs triggered by an external scheduler."""
