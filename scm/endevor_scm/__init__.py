# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Endevor SCM service: form descriptors, checkout, HTTP API and CLI."""

__version__ = "0.1.0"
