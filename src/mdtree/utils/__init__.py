#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Support utilities for mdtree (dependency checks, timing)."""
