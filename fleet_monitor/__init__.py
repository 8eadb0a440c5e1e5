"""
Fleet Monitor - root package.

This package contains the camera status classification engine (domain),
the dashboard query and override use cases (application), and the HTTP
clients and snapshot cache used to assemble camera signals (infrastructure).
"""
