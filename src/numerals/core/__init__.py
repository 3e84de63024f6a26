"""
Core value objects, encoding algorithm, and contracts.

Independent of any I/O: everything here is pure and safe to share between
threads.
"""
