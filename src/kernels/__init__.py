"""
Kernel layer.

`src/kernels/python/` holds the integer-only pricing and share kernels. They
know nothing about pool lifecycle or integer widths; the state machine in
`src/core/pool/` wraps them with guards and checked arithmetic.
"""
