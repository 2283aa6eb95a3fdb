"""
Import checks for the data and service layers

Each module is imported in a fresh interpreter so class bodies and
annotations are evaluated without anything cached from conftest.
"""
import os
import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]

MODULES = [
    "app.repositories.carousel_repo",
    "app.repositories.category_repo",
    "app.repositories.footer_repo",
    "app.repositories.product_repo",
    "app.services.carousel_service",
    "app.services.category_service",
    "app.services.footer_service",
    "app.services.product_service",
    "app.services.search",
]


class TestModuleImports:
    """Test every repository and service module imports on its own"""

    @pytest.mark.parametrize("module", MODULES)
    def test_module_imports_cleanly(self, module):
        result = subprocess.run(
            [sys.executable, "-c", f"import {module}"],
            cwd=PROJECT_ROOT,
            env=dict(os.environ),
            capture_output=True,
            text=True,
        )

        assert result.returncode == 0, result.stderr

    def test_save_orders_annotation_resolves(self):
        from typing import get_type_hints

        from app.models.carousel import CarouselImage
        from app.repositories.carousel_repo import CarouselRepository

        hints = get_type_hints(CarouselRepository.save_orders)

        assert hints["images"] == list[CarouselImage]
