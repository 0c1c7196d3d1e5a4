from uuid_utils import UUID

from src.platform.database.unit_of_work import UnitOfWorkFactory
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.domain.entity.seat_map import SeatMap


class GetSeatMapUseCase:
    """Snapshot of a screening's seats for building a selection; edits to it are never persisted."""

    def __init__(self, *, uow_factory: UnitOfWorkFactory) -> None:
        self.uow_factory = uow_factory

    @Logger.io
    async def execute(self, *, screening_id: UUID) -> SeatMap:
        async with self.uow_factory() as uow:
            screening = await uow.screening_repo.load_screening(screening_id=screening_id)
        if screening is None:
            raise NotFoundError(f'Screening {screening_id} not found')
        return screening.seat_map.clone()
