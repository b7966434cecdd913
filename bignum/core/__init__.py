"""
Core domain models, arithmetic kernels and conversions.

This package is independent of any configuration or status channel; every
operation here is a pure function returning an explicit result.
"""
