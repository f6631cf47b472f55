# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil

"""
Best-effort internal diagnostics.
"""

from __future__ import annotations

from stencil.diagnostics import self_log

__all__ = ["self_log"]
