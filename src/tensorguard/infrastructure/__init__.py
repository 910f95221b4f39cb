"""NumPy-backed infrastructure: the tensor wrapper, guards and operations."""
