"""Unit tests for catalog filter criteria."""

from decimal import Decimal

import pytest

from taller.domain.exceptions import ValidationError
from taller.domain.model.catalog import Part, Service
from taller.domain.model.filters import Activity, NumericRange, PartFilter, ServiceFilter
from taller.domain.model.stock import StockBucket
from taller.domain.model.value_objects import Money


def _services() -> list[Service]:
    return [
        Service(id=1, code="MNT-01", name="Oil change", price=Money.of("45"),
                category="MANTENIMIENTO", estimated_minutes=30),
        Service(id=2, code="MNT-02", name="Full tune-up", price=Money.of("120"),
                category="MANTENIMIENTO", estimated_minutes=180),
        Service(id=3, code="REP-01", name="Front assembly", price=Money.of("80"),
                category="REPARACION", description="Replace brake lines and pads",
                estimated_minutes=90),
        Service(id=4, code="DIA-01", name="Electrical diagnosis", price=Money.of("35"),
                category="DIAGNOSTICO", estimated_minutes=60, active=False),
        Service(id=5, code="LIM-01", name="Wash", price=Money.of("15"),
                category="LIMPIEZA", estimated_minutes=20),
    ]


def _parts() -> list[Part]:
    return [
        Part(id=1, code="FIL-01", name="Oil filter", price=Money.of("18"),
             category="FILTROS", current_stock=0, minimum_stock=5),
        Part(id=2, code="FRE-01", name="Brake pad", price=Money.of("35"),
             category="FRENOS", current_stock=3, minimum_stock=5),
        Part(id=3, code="ELE-01", name="Spark plug", price=Money.of("12"),
             category="ELECTRICO", current_stock=8, minimum_stock=5),
        Part(id=4, code="MOT-01", name="Piston kit", price=Money.of("250"),
             category="MOTOR", current_stock=40, minimum_stock=5),
    ]


class TestNumericRange:

    def test_open_range_contains_everything(self):
        r = NumericRange()
        assert r.is_open
        assert r.contains(10 ** 9)

    def test_bounds_are_inclusive(self):
        r = NumericRange(Decimal("10"), Decimal("20"))
        assert r.contains(Decimal("10"))
        assert r.contains(Decimal("20"))
        assert not r.contains(Decimal("20.01"))

    def test_inverted_range_rejected(self):
        with pytest.raises(ValidationError, match="greater than maximum"):
            NumericRange(5, 1)


class TestServiceFilter:

    def test_default_filter_keeps_everything(self):
        f = ServiceFilter()
        assert f.active_count() == 0
        assert f.apply(_services()) == _services()

    def test_term_matching_only_description(self):
        result = ServiceFilter(term="brake").apply(_services())
        assert [s.id for s in result] == [3]

    def test_term_is_case_insensitive_across_fields(self):
        assert [s.id for s in ServiceFilter(term="mnt").apply(_services())] == [1, 2]
        assert [s.id for s in ServiceFilter(term="limpieza").apply(_services())] == [5]

    def test_category(self):
        result = ServiceFilter(category="MANTENIMIENTO").apply(_services())
        assert [s.id for s in result] == [1, 2]

    def test_activity(self):
        assert [s.id for s in ServiceFilter(activity=Activity.INACTIVE).apply(_services())] == [4]
        assert len(ServiceFilter(activity=Activity.ACTIVE).apply(_services())) == 4

    def test_price_range(self):
        f = ServiceFilter(price=NumericRange(Decimal("30"), Decimal("80")))
        assert [s.id for s in f.apply(_services())] == [1, 3, 4]

    def test_minutes_range(self):
        f = ServiceFilter(minutes=NumericRange(60, 120))
        assert [s.id for s in f.apply(_services())] == [3, 4]

    def test_criteria_combine_with_and(self):
        f = ServiceFilter(
            category="MANTENIMIENTO",
            price=NumericRange(maximum=Decimal("100")),
        )
        assert f.active_count() == 2
        assert [s.id for s in f.apply(_services())] == [1]

    def test_matches_single_item(self):
        assert ServiceFilter(term="wash").matches(_services()[4])
        assert not ServiceFilter(term="wash").matches(_services()[0])


class TestPartFilter:

    @pytest.mark.parametrize(
        "bucket, expected",
        [
            (StockBucket.NO_STOCK, [1]),
            (StockBucket.LOW, [2]),
            (StockBucket.MEDIUM, [3]),
            (StockBucket.NORMAL, [4]),
        ],
    )
    def test_stock_bucket(self, bucket, expected):
        assert [p.id for p in PartFilter(stock=bucket).apply(_parts())] == expected

    def test_stock_and_term(self):
        f = PartFilter(term="oil", stock=StockBucket.NO_STOCK)
        assert f.active_count() == 2
        assert [p.id for p in f.apply(_parts())] == [1]

    def test_empty_result(self):
        assert PartFilter(term="nothing like this").apply(_parts()) == []
