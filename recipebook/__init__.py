# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Recipe book REST service: chefs, sessions, recipes and ingredients."""

__version__ = "0.1.0"
