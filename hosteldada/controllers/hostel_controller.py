"""HTTP controller layer for the hostel toolkit modules."""

from __future__ import annotations

import math
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field, model_validator

from hosteldada.controllers.dependencies import get_hostel_service, require_admin
from hosteldada.domain.constraints import MAX_HOUR, MIN_HOUR
from hosteldada.domain.models import Interval, StockItem
from hosteldada.repository.seed_repository import DEFAULT_PATH_DESTINATION, DEFAULT_PATH_SOURCE
from hosteldada.services.booking_service import BookingValidationError, SlotConflictError
from hosteldada.services.hostel_service import HostelWorkflowService
from hosteldada.services.matching_service import AssignmentValidationError
from hosteldada.services.path_service import PathValidationError
from hosteldada.services.queue_service import QueueValidationError
from hosteldada.services.stock_service import OutOfStockError, StockValidationError
from hosteldada.services.task_service import TaskValidationError
from hosteldada.utils.logger import get_logger


logger = get_logger(__name__)

router = APIRouter(tags=["hostel"])


class StockItemResponse(BaseModel):
    name: str
    quantity: int = Field(ge=0)
    price: int
    expiry: str


class PurchaseRequest(BaseModel):
    name: str = Field(min_length=1)
    quantity: int = Field(gt=0)


class SaleRecordResponse(BaseModel):
    name: str
    profit: int


class ProfitReportResponse(BaseModel):
    records: list[SaleRecordResponse]
    total_profit: int


class AssignmentResponse(BaseModel):
    assignments: dict[str, str]
    unassigned_students: list[str]
    strategy: str


class DishResponse(BaseModel):
    name: str
    rating: int


class WeekPlanRow(BaseModel):
    day: str
    dish: str


class SlotRequest(BaseModel):
    start: int = Field(ge=MIN_HOUR, le=MAX_HOUR)
    end: int = Field(ge=MIN_HOUR, le=MAX_HOUR)

    @model_validator(mode="after")
    def validate_slot_order(self) -> SlotRequest:
        if self.start >= self.end:
            raise ValueError("start hour must be less than end hour")
        return self


class SlotResponse(BaseModel):
    start: int
    end: int


class TaskRequest(BaseModel):
    description: str = Field(min_length=1)
    urgency: int = Field(description="lower values are listed first; 1-10 by convention")


class TaskResponse(BaseModel):
    description: str
    urgency: int


class RouteResponse(BaseModel):
    source: str
    destination: str
    nodes: list[str]
    distance: Optional[float] = Field(default=None, description="null when unreachable")
    reachable: bool


class QueueWindowResponse(BaseModel):
    start_time: int
    end_time: int
    count: int


class QueueReportResponse(BaseModel):
    window_size: int
    windows: list[QueueWindowResponse]
    best_entry_time: Optional[int]
    minimum_count: Optional[int]


def _stock_rows(items: list[StockItem]) -> list[StockItemResponse]:
    return [
        StockItemResponse(
            name=item.name,
            quantity=item.quantity,
            price=item.price,
            expiry=item.expiry,
        )
        for item in items
    ]


def _slot_rows(slots: list[Interval]) -> list[SlotResponse]:
    return [SlotResponse(start=slot.start, end=slot.end) for slot in slots]


@router.get("/snacks", response_model=list[StockItemResponse])
async def list_snacks(
    service: HostelWorkflowService = Depends(get_hostel_service),
) -> list[StockItemResponse]:
    """Stock ordered by expiry, earliest first."""
    return _stock_rows(service.list_stock())


@router.post(
    "/snacks/purchase",
    response_model=SaleRecordResponse,
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(require_admin)],
)
async def purchase_snack(
    payload: PurchaseRequest,
    service: HostelWorkflowService = Depends(get_hostel_service),
) -> SaleRecordResponse:
    try:
        record = service.purchase_snack(payload.name, payload.quantity)
        return SaleRecordResponse(name=record.name, profit=record.profit)
    except StockValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    except OutOfStockError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(exc),
        ) from exc


@router.get("/snacks/profit", response_model=ProfitReportResponse)
async def profit_report(
    service: HostelWorkflowService = Depends(get_hostel_service),
) -> ProfitReportResponse:
    report = service.profit_report()
    return ProfitReportResponse(
        records=[
            SaleRecordResponse(name=record.name, profit=record.profit)
            for record in report.records
        ],
        total_profit=report.total_profit,
    )


@router.get("/snacks/low_stock", response_model=list[StockItemResponse])
async def low_stock(
    threshold: Optional[int] = Query(default=None, ge=0),
    service: HostelWorkflowService = Depends(get_hostel_service),
) -> list[StockItemResponse]:
    return _stock_rows(service.low_stock(threshold))


@router.get("/snacks/search", response_model=list[StockItemResponse])
async def search_snacks(
    prefix: str = Query(default=""),
    service: HostelWorkflowService = Depends(get_hostel_service),
) -> list[StockItemResponse]:
    return _stock_rows(service.search_snacks(prefix))


@router.get("/rooms/assignments", response_model=AssignmentResponse)
async def room_assignments(
    strategy: Optional[str] = Query(default=None),
    service: HostelWorkflowService = Depends(get_hostel_service),
) -> AssignmentResponse:
    try:
        result = service.assign_rooms(strategy=strategy)
    except AssignmentValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    return AssignmentResponse(
        assignments=result.assignments,
        unassigned_students=result.unassigned_students,
        strategy=result.strategy,
    )


@router.get("/dishes/top", response_model=list[DishResponse])
async def top_dishes(
    k: Optional[int] = Query(default=None, gt=0),
    service: HostelWorkflowService = Depends(get_hostel_service),
) -> list[DishResponse]:
    return [DishResponse(name=dish.name, rating=dish.rating) for dish in service.top_dishes(k)]


@router.get("/dishes/week_plan", response_model=list[WeekPlanRow])
async def week_plan(
    service: HostelWorkflowService = Depends(get_hostel_service),
) -> list[WeekPlanRow]:
    return [WeekPlanRow(day=day, dish=dish) for day, dish in service.week_plan()]


@router.get("/laundry/slots", response_model=list[SlotResponse])
async def list_laundry_slots(
    service: HostelWorkflowService = Depends(get_hostel_service),
) -> list[SlotResponse]:
    return _slot_rows(service.list_laundry_slots())


@router.post(
    "/laundry/slots",
    response_model=SlotResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def book_laundry_slot(
    payload: SlotRequest,
    service: HostelWorkflowService = Depends(get_hostel_service),
) -> SlotResponse:
    try:
        slot = service.book_laundry_slot(payload.start, payload.end)
        return SlotResponse(start=slot.start, end=slot.end)
    except BookingValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    except SlotConflictError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(exc),
        ) from exc


@router.get("/tasks", response_model=list[TaskResponse])
async def list_tasks(
    service: HostelWorkflowService = Depends(get_hostel_service),
) -> list[TaskResponse]:
    return [
        TaskResponse(description=task.description, urgency=task.urgency)
        for task in service.list_tasks()
    ]


@router.post(
    "/tasks",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def add_task(
    payload: TaskRequest,
    service: HostelWorkflowService = Depends(get_hostel_service),
) -> TaskResponse:
    try:
        task = service.add_task(payload.description, payload.urgency)
    except TaskValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    return TaskResponse(description=task.description, urgency=task.urgency)


@router.get("/paths/shortest", response_model=RouteResponse)
async def shortest_path(
    source: str = Query(default=DEFAULT_PATH_SOURCE, min_length=1),
    destination: str = Query(default=DEFAULT_PATH_DESTINATION, min_length=1),
    service: HostelWorkflowService = Depends(get_hostel_service),
) -> RouteResponse:
    try:
        route = service.shortest_route(source, destination)
    except PathValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    return RouteResponse(
        source=route.source,
        destination=route.destination,
        nodes=route.nodes,
        distance=None if math.isinf(route.distance) else route.distance,
        reachable=route.reachable,
    )


@router.get("/mess/queue", response_model=QueueReportResponse)
async def mess_queue(
    service: HostelWorkflowService = Depends(get_hostel_service),
) -> QueueReportResponse:
    try:
        report = service.queue_report()
    except QueueValidationError as exc:
        logger.exception("Queue report failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc
    return QueueReportResponse(
        window_size=report.window_size,
        windows=[
            QueueWindowResponse(
                start_time=window.start_time,
                end_time=window.end_time,
                count=window.count,
            )
            for window in report.windows
        ],
        best_entry_time=report.best_entry_time,
        minimum_count=report.minimum_count,
    )
