"""Shared pytest fixtures — async test client, settings override, sample crops."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from cropwater.config import Settings, get_settings
from cropwater.main import app
from cropwater.models.crops import CropRecord, GrowthStages
from cropwater.models.enums import CropCategoryEnum


@pytest.fixture
def test_settings() -> Settings:
	"""Settings isolated from any local .env file."""
	return Settings(_env_file=None, default_et0_mm_day=4.5, kc_curve_step_days=1.0)


@pytest.fixture
def soy_like_crop() -> CropRecord:
	"""Ad-hoc record with the soybean schedule (15/25/50/30 days)."""
	return CropRecord(
		id="test-soy",
		name="Test Soy",
		local_name="Soja Teste",
		category=CropCategoryEnum.oilseeds,
		description="fixture",
		kc_initial=0.4,
		kc_mid=1.15,
		kc_end=0.5,
		max_height=0.8,
		growth_stages=GrowthStages(initial=15, development=25, mid_season=50, late_season=30),
	)


@pytest.fixture
async def client(test_settings: Settings) -> AsyncGenerator[AsyncClient, None]:
	"""HTTPX async client with lifespan disabled and settings overridden."""

	app.dependency_overrides[get_settings] = lambda: test_settings
	original_lifespan = app.router.lifespan_context

	@asynccontextmanager
	async def noop_lifespan(_: Any) -> AsyncGenerator[None, None]:
		yield

	app.router.lifespan_context = noop_lifespan

	transport = ASGITransport(app=app)
	async with AsyncClient(transport=transport, base_url="http://test") as test_client:
		yield test_client

	app.router.lifespan_context = original_lifespan
	app.dependency_overrides.clear()
