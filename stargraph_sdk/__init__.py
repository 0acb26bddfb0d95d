# stargraph_sdk/__init__.py
# SPDX-License-Identifier: Apache-2.0
"""Star graph wire record readers."""
