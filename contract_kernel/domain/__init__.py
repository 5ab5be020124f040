"""Pure domain layer for the contract kernel: no logging, no I/O."""
