# SPDX-License-Identifier: Apache-2.0
"""
Star Graph SDK Tests

Model, reader, settings, and golden-schema tests for stargraph_sdk.graph.
"""
