"""Global pytest fixtures for fouroneone."""

pytest_plugins = [
    "tests.fixtures.sqlite",
]
