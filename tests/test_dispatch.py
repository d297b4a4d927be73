"""Driver: managers, sample orders and fixed sequence."""

from __future__ import annotations

from adapters.processors import (
    DigitalOrderProcessor,
    PhysicalOrderProcessor,
    SubscriptionOrderProcessor,
)
from core.services import dispatch
from core.services.order_manager import ManagerHooks

EXPECTED = [
    "Processing digital order: Kotlin e-book with url 'www.downloads.com'.",
    "Processing physical order: Printed Kotlin book with address 'c/Goya, 12'.",
    "Processing subscription order: Kotlin course subscription, duration = 12 months.",
]


class TestBuildManagers:
    def test_one_manager_per_variant(self) -> None:
        managers = dispatch.build_managers()

        assert isinstance(managers.digital.processor, DigitalOrderProcessor)
        assert isinstance(managers.physical.processor, PhysicalOrderProcessor)
        assert isinstance(managers.subscription.processor, SubscriptionOrderProcessor)

    def test_processors_share_the_given_console(self, buffered) -> None:
        managers = dispatch.build_managers(buffered.console)

        assert managers.digital.processor.console is buffered.console
        assert managers.subscription.processor.console is buffered.console


class TestSampleOrders:
    def test_sample_values(self) -> None:
        orders = dispatch.sample_orders()

        assert (orders.digital.id, orders.physical.id, orders.subscription.id) == (1, 2, 3)
        assert orders.physical.shipping_address == "c/Goya, 12"
        assert orders.subscription.duration_months == 12


class TestRun:
    def test_prints_three_lines_in_order(self, capsys) -> None:
        dispatch.run()

        assert capsys.readouterr().out.splitlines() == EXPECTED

    def test_uses_given_managers(self, buffered, capsys) -> None:
        dispatch.run(dispatch.build_managers(buffered.console))

        assert buffered.lines() == EXPECTED
        assert capsys.readouterr().out == ""

    def test_hooks_see_orders_in_sequence(self, buffered) -> None:
        seen: list[str] = []
        hooks = ManagerHooks(before=lambda order: seen.append(type(order).__name__))

        dispatch.run(dispatch.build_managers(buffered.console, hooks=hooks))

        assert seen == ["DigitalOrder", "PhysicalOrder", "SubscriptionOrder"]
