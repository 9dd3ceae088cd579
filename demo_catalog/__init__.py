"""
Demo catalog package.

Binds display names, descriptions and UI option bounds to the point-cloud
generators in ``point_clouds``.
"""

from .catalog import (
    Option,
    DemoConfig,
    DemoRunConfig,
    DEMOS,
    DEMOS_BY_NAME,
    build_catalog,
    get_demo,
    run_demo,
    catalog_frame
)

__all__ = [
    'Option',
    'DemoConfig',
    'DemoRunConfig',
    'DEMOS',
    'DEMOS_BY_NAME',
    'build_catalog',
    'get_demo',
    'run_demo',
    'catalog_frame'
]
