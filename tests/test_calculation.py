"""
Tests for the calculation engine, package selector and pipeline.

Covers:
- Heat loss and power heat loss
- VAT-inclusive cost totals
- Smallest adequate package selection
- Pipeline outcomes (complete, no package, region not found)
"""

import pytest

from eecalc.calculation import (
    DEFAULT_VAT_RATE,
    Outcome,
    compute_heat_loss,
    compute_power_heat_loss,
    compute_total_cost,
    find_building,
    run_pipeline,
    select_package,
)
from eecalc.core.models import BuildingRecord, HeatPumpPackage
from eecalc.weather import ClientError, ClientErrorKind


class TestHeatLoss:
    """Test building heat loss."""

    def test_product_of_factors(self, house):
        """125 m² x 101 x 1.3."""
        assert compute_heat_loss(house) == 16412.5

    def test_small_building(self):
        building = BuildingRecord(
            submission_id="small",
            design_region="Thames Valley (Heathrow)",
            floor_area=10,
            heating_factor=2,
            insulation_factor=0.5,
        )
        assert compute_heat_loss(building) == 10


class TestPowerHeatLoss:
    """Test heat loss normalized by degree-days."""

    def test_divides_by_degree_days(self, house, fake_weather_client):
        assert compute_power_heat_loss(house, 96, fake_weather_client) == pytest.approx(0.48)

    def test_looks_up_design_region(self, house, fake_weather_client):
        compute_power_heat_loss(house, 96, fake_weather_client)
        assert fake_weather_client.regions == ["Severn Valley (Filton)"]

    def test_client_error_propagates_unchanged(self, house, fake_weather_client):
        error = ClientError.not_found("Severn Valley (Filton)")
        fake_weather_client.error = error

        with pytest.raises(ClientError) as exc_info:
            compute_power_heat_loss(house, 96, fake_weather_client)

        assert exc_info.value is error

    @pytest.mark.parametrize("degree_days", [0, -5])
    def test_non_positive_degree_days_is_generic(self, house, fake_weather_client, degree_days):
        fake_weather_client.degree_days = degree_days

        with pytest.raises(ClientError) as exc_info:
            compute_power_heat_loss(house, 96, fake_weather_client)

        assert exc_info.value.kind is ClientErrorKind.GENERIC


class TestTotalCost:
    """Test VAT-inclusive totals."""

    def test_sum_with_vat(self, eight_kw_package):
        """4216 + 2900 + 150 + 300 + 1648 = 9214, plus 5% VAT."""
        assert compute_total_cost(eight_kw_package) == pytest.approx(9674.7)

    def test_default_vat_is_five_percent(self):
        assert DEFAULT_VAT_RATE == 0.05

    def test_custom_vat_rate(self, eight_kw_package):
        assert compute_total_cost(eight_kw_package, vat_rate=0.2) == pytest.approx(11056.8)

    def test_package_without_costs(self):
        package = HeatPumpPackage(label="Empty", output_capacity=3)
        assert compute_total_cost(package) == 0


class TestSelectPackage:
    """Test minimal-capacity selection."""

    def test_smallest_adequate_package(self, heat_pumps):
        selected = select_package(heat_pumps, 0.48)
        assert selected is heat_pumps[1]
        assert selected.label == "5kW Package"

    def test_skips_packages_that_are_too_small(self, heat_pumps):
        assert select_package(heat_pumps, 9).label == "12kW Package"

    def test_exact_capacity_qualifies(self, heat_pumps):
        assert select_package(heat_pumps, 8).label == "8kW Package"

    def test_none_when_nothing_is_big_enough(self, heat_pumps):
        assert select_package(heat_pumps, 20) is None

    def test_empty_catalog(self):
        assert select_package([], 1) is None

    def test_ties_keep_catalog_order(self):
        first = HeatPumpPackage(label="First 8kW", output_capacity=8)
        second = HeatPumpPackage(label="Second 8kW", output_capacity=8)
        assert select_package([second, first], 5) is second
        assert select_package([first, second], 5) is first


class TestFindBuilding:
    """Test submission lookup."""

    def test_found(self, house):
        assert find_building([house], house.submission_id) is house

    def test_not_found(self, house):
        assert find_building([house], "missing") is None


class TestPipeline:
    """Test the full estimate pipeline."""

    def test_complete_run(self, house, heat_pumps, fake_weather_client):
        """16412.5 / 2000 = 8.2 kW, covered by the 12 kW package."""
        fake_weather_client.degree_days = 2000
        result = run_pipeline(house, heat_pumps, fake_weather_client)

        assert result.outcome is Outcome.COMPLETE
        assert result.is_complete
        assert result.heat_loss == pytest.approx(16412.5)
        assert result.power_heat_loss == pytest.approx(8.20625)
        assert result.package.label == "12kW Package"
        assert result.total_cost == pytest.approx((5138 + 2900 + 150 + 300 + 1648) * 1.05)
        assert result.error is None

    def test_no_package(self, house, heat_pumps, fake_weather_client):
        result = run_pipeline(house, heat_pumps, fake_weather_client)

        assert result.outcome is Outcome.NO_PACKAGE
        assert result.power_heat_loss == pytest.approx(82.0625)
        assert result.package is None
        assert result.total_cost is None

    def test_region_not_found(self, house, heat_pumps, fake_weather_client):
        fake_weather_client.error = ClientError.not_found(house.design_region)

        result = run_pipeline(house, heat_pumps, fake_weather_client)

        assert result.outcome is Outcome.REGION_NOT_FOUND
        assert result.heat_loss == pytest.approx(16412.5)
        assert result.power_heat_loss is None
        assert result.package is None
        assert result.error.kind is ClientErrorKind.NOT_FOUND

    @pytest.mark.parametrize("error", [
        ClientError.generic("HTTP 500", status_code=500),
        ClientError.missing_credentials(),
    ])
    def test_other_client_errors_raise(self, house, heat_pumps, fake_weather_client, error):
        fake_weather_client.error = error

        with pytest.raises(ClientError) as exc_info:
            run_pipeline(house, heat_pumps, fake_weather_client)

        assert exc_info.value is error

    def test_unexpected_errors_are_not_swallowed(self, house, heat_pumps, fake_weather_client):
        fake_weather_client.error = RuntimeError("boom")

        with pytest.raises(RuntimeError):
            run_pipeline(house, heat_pumps, fake_weather_client)

    def test_vat_rate_passed_through(self, house, heat_pumps, fake_weather_client):
        fake_weather_client.degree_days = 2000
        result = run_pipeline(house, heat_pumps, fake_weather_client, vat_rate=0)
        assert result.total_cost == pytest.approx(5138 + 2900 + 150 + 300 + 1648)
