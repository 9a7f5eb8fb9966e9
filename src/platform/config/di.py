"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.seating.app.command.process_batch_use_case import ProcessBatchUseCase
from src.service.seating.domain.seat_chart import SeatChart


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # A fresh chart per batch
    seat_chart = providers.Factory(
        SeatChart,
        rows=config_service.provided.SEATING_ROWS,
        cols=config_service.provided.SEATING_COLS,
        max_seat_request=config_service.provided.MAX_SEAT_REQUEST,
    )

    # Use Cases
    process_batch_use_case = providers.Factory(
        ProcessBatchUseCase,
        seat_chart_factory=seat_chart.provider,
        not_enough_seats_message=config_service.provided.NOT_ENOUGH_SEATS_MESSAGE,
        seat_range_separator=config_service.provided.SEAT_RANGE_SEPARATOR,
    )


container = Container()


def cleanup() -> None:
    container.reset_singletons()
