"""
Прикладной слой сессии.

HotelSession - единственное место, где согласуются номера, журнал
бронирований, клиенты и счета. Хранилища друг друга не вызывают;
все межконтекстные эффекты проходят через методы сессии.

Все методы возвращают OperationResult: отсутствие сущности или
недопустимые входные данные - обычный результат, а не исключение.
"""

from datetime import datetime
from typing import Any, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, Field, ValidationError

from ..accounting.domain import BillCalculated, Invoice
from ..booking.domain import Booking, BookingCancelled, RoomBooked
from ..config import HotelSettings
from ..customers.domain import Customer
from ..rooms.domain import Room
from ..shared_kernel import (
    ConsoleLogger,
    DomainException,
    ErrorCode,
    OperationResult,
    RoomStatus,
)
from ..shared_kernel import interfaces as kernel_ports
from .infrastructure import HotelUnitOfWork

T_Request = TypeVar("T_Request", bound=BaseModel)

# DTO для входящих данных


class AddRoomRequest(BaseModel):
    """Запрос на добавление номера."""

    number: int
    room_type: str = Field(..., min_length=1)


class BookRoomRequest(BaseModel):
    """Запрос на бронирование номера."""

    booking_id: str = Field(..., min_length=1)
    room_number: int
    customer_name: str = Field(..., min_length=1)


class AddCustomerRequest(BaseModel):
    """Запрос на регистрацию клиента."""

    name: str = Field(..., min_length=1)
    contact_info: str


class SetRateRequest(BaseModel):
    """Запрос на установку тарифа."""

    room_type: str = Field(..., min_length=1)
    rate: float = Field(..., ge=0, allow_inf_nan=False)


class CalculateBillRequest(BaseModel):
    """Запрос на расчет счета."""

    booking_id: str = Field(..., min_length=1)
    room_type: str
    days: int = Field(..., ge=0)


# DTO для исходящих данных


class RoomDTO(BaseModel):
    """DTO для представления номера."""

    number: int
    type: str
    status: RoomStatus

    @classmethod
    def from_domain(cls, room: Room) -> "RoomDTO":
        return cls(number=room.number, type=room.type, status=room.status)

    def describe(self) -> str:
        return f"Room {self.number} ({self.type})"


class BookingDTO(BaseModel):
    """DTO для представления бронирования."""

    id: str
    room_number: int
    customer_name: str
    created_at: str

    @classmethod
    def from_domain(cls, booking: Booking) -> "BookingDTO":
        return cls(
            id=booking.id,
            room_number=booking.room_number,
            customer_name=booking.customer_name,
            created_at=booking.created_at.isoformat(),
        )


class CustomerDTO(BaseModel):
    """DTO для представления клиента."""

    name: str
    contact_info: str
    booking_history: List[str]

    @classmethod
    def from_domain(cls, customer: Customer) -> "CustomerDTO":
        return cls(
            name=customer.name,
            contact_info=customer.contact_info,
            booking_history=list(customer.booking_history),
        )


class InvoiceDTO(BaseModel):
    """DTO для представления счета."""

    booking_id: str
    room_type: str
    days: int
    rate: float
    amount: float
    calculated_at: datetime

    @classmethod
    def from_domain(cls, invoice: Invoice) -> "InvoiceDTO":
        return cls(**invoice.model_dump())


# Сервис приложения


class HotelSession:
    """
    Оркестратор сессии оператора.

    Бронирование и отмена выполняются внутри единицы работы: при сбое
    любого шага все хранилища возвращаются в исходное состояние.
    """

    def __init__(
        self,
        uow: HotelUnitOfWork,
        settings: Optional[HotelSettings] = None,
        logger: Optional[kernel_ports.ILogger] = None,
    ):
        self._uow = uow
        self._settings = settings or HotelSettings()
        self._logger = logger or ConsoleLogger(__name__)

    @property
    def uow(self) -> HotelUnitOfWork:
        return self._uow

    @property
    def settings(self) -> HotelSettings:
        return self._settings

    def _parse(
        self, request_cls: Type[T_Request], **data: Any
    ) -> Tuple[Optional[T_Request], Optional[OperationResult]]:
        """Проверяет входные данные; при ошибке возвращает готовый отказ."""
        try:
            return request_cls(**data), None
        except ValidationError as e:
            fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
            self._logger.info(
                f"Rejected {request_cls.__name__}", fields=fields
            )
            return None, OperationResult.failure(
                ErrorCode.INVALID_ARGUMENT,
                f"Invalid input: {', '.join(fields)}.",
                fields=fields,
            )

    # Номера

    def add_room(self, number: int, room_type: str) -> OperationResult:
        """Регистрирует новый свободный номер."""
        request, rejected = self._parse(AddRoomRequest, number=number, room_type=room_type)
        if rejected is not None:
            return rejected

        if self._uow.rooms.get(request.number) is not None:
            return OperationResult.failure(
                ErrorCode.ROOM_ALREADY_EXISTS,
                f"Room {request.number} already exists.",
                room_number=request.number,
            )

        room = self._uow.rooms.add_room(request.number, request.room_type)
        self._logger.info("Room added", room_number=room.number, room_type=room.type)
        return OperationResult.success(
            RoomDTO.from_domain(room), "Room added successfully."
        )

    def remove_room(self, number: int) -> OperationResult:
        """Удаляет номер. Номер, на который есть бронирование, удалить нельзя."""
        room = self._uow.rooms.get(number)
        if room is None:
            return OperationResult.failure(
                ErrorCode.ROOM_NOT_FOUND, f"Room {number} not found.", room_number=number
            )
        if not room.is_available or self._uow.bookings.find_by_room(number):
            return OperationResult.failure(
                ErrorCode.ROOM_OCCUPIED,
                f"Room {number} is occupied and cannot be removed.",
                room_number=number,
            )

        self._uow.rooms.remove_room(number)
        self._logger.info("Room removed", room_number=number)
        return OperationResult.success(message="Room removed successfully.")

    def check_availability(self, number: int) -> bool:
        return self._uow.rooms.check_availability(number)

    def list_available_rooms(self) -> List[RoomDTO]:
        """Возвращает свободные номера в порядке регистрации."""
        return [RoomDTO.from_domain(room) for room in self._uow.rooms.list_available()]

    # Бронирования

    def book_room(
        self, booking_id: str, room_number: int, customer_name: str
    ) -> OperationResult:
        """
        Бронирует номер.

        Порядок шагов: проверка номера и идентификатора (без изменений),
        затем в одной единице работы - номер занят, запись в журнале,
        бронирование добавлено в историю клиента. Если клиента нет,
        он создается с контактом-заглушкой, и бронирование сразу
        попадает в его историю.
        """
        request, rejected = self._parse(
            BookRoomRequest,
            booking_id=booking_id,
            room_number=room_number,
            customer_name=customer_name,
        )
        if rejected is not None:
            return rejected

        room = self._uow.rooms.get(request.room_number)
        if room is None:
            return OperationResult.failure(
                ErrorCode.ROOM_NOT_FOUND,
                f"Room not available. Room {request.room_number} does not exist.",
                room_number=request.room_number,
            )
        if not self._uow.rooms.check_availability(request.room_number):
            return OperationResult.failure(
                ErrorCode.ROOM_UNAVAILABLE,
                "Room not available.",
                room_number=request.room_number,
            )
        if self._uow.bookings.get(request.booking_id) is not None:
            return OperationResult.failure(
                ErrorCode.BOOKING_ALREADY_EXISTS,
                f"Booking ID {request.booking_id} is already in use.",
                booking_id=request.booking_id,
            )

        try:
            with self._uow:
                self._uow.rooms.update_status(request.room_number, RoomStatus.OCCUPIED)
                booking = self._uow.bookings.book(
                    request.booking_id, request.room_number, request.customer_name
                )

                customer = self._uow.customers.find(request.customer_name)
                new_customer = customer is None
                if new_customer:
                    customer = self._uow.customers.add(
                        request.customer_name, self._settings.contact_placeholder
                    )
                customer.add_booking(request.booking_id)

                self._uow.collect(
                    RoomBooked(
                        booking_id=booking.id,
                        room_number=booking.room_number,
                        customer_name=booking.customer_name,
                        new_customer=new_customer,
                    )
                )
        except (DomainException, ValidationError) as e:
            self._logger.error(
                "Booking rolled back", booking_id=request.booking_id, error=str(e)
            )
            return OperationResult.failure(
                ErrorCode.INVALID_ARGUMENT,
                "Booking could not be completed.",
                booking_id=request.booking_id,
            )

        self._logger.info(
            "Room booked",
            booking_id=booking.id,
            room_number=booking.room_number,
            customer_name=booking.customer_name,
        )
        return OperationResult.success(
            BookingDTO.from_domain(booking), "Room booked successfully."
        )

    def cancel_booking(
        self, booking_id: str, reason: Optional[str] = None
    ) -> OperationResult:
        """Отменяет бронирование и освобождает номер."""
        booking = self._uow.bookings.get(booking_id)
        if booking is None:
            return OperationResult.failure(
                ErrorCode.BOOKING_NOT_FOUND,
                "Booking ID not found.",
                booking_id=booking_id,
            )

        try:
            with self._uow:
                self._uow.rooms.update_status(booking.room_number, RoomStatus.AVAILABLE)
                self._uow.bookings.cancel(booking_id)
                self._uow.collect(
                    BookingCancelled(
                        booking_id=booking_id,
                        room_number=booking.room_number,
                        reason=reason,
                    )
                )
        except (DomainException, ValidationError) as e:
            self._logger.error(
                "Cancellation rolled back", booking_id=booking_id, error=str(e)
            )
            return OperationResult.failure(
                ErrorCode.INVALID_ARGUMENT,
                "Booking could not be cancelled.",
                booking_id=booking_id,
            )

        self._logger.info(
            "Booking cancelled", booking_id=booking_id, room_number=booking.room_number
        )
        return OperationResult.success(
            BookingDTO.from_domain(booking), "Booking cancelled successfully."
        )

    def get_booking(self, booking_id: str) -> OperationResult:
        """Возвращает информацию о бронировании."""
        booking = self._uow.bookings.get(booking_id)
        if booking is None:
            return OperationResult.failure(
                ErrorCode.BOOKING_NOT_FOUND,
                "Booking ID not found.",
                booking_id=booking_id,
            )
        return OperationResult.success(BookingDTO.from_domain(booking))

    # Клиенты

    def add_customer(self, name: str, contact_info: str) -> OperationResult:
        """Регистрирует нового клиента."""
        request, rejected = self._parse(
            AddCustomerRequest, name=name, contact_info=contact_info
        )
        if rejected is not None:
            return rejected

        if self._uow.customers.find(request.name) is not None:
            return OperationResult.failure(
                ErrorCode.CUSTOMER_ALREADY_EXISTS,
                f"Customer {request.name} already exists.",
                name=request.name,
            )

        customer = self._uow.customers.add(request.name, request.contact_info)
        self._logger.info("Customer added", name=customer.name)
        return OperationResult.success(
            CustomerDTO.from_domain(customer), "Customer added successfully."
        )

    def remove_customer(self, name: str) -> OperationResult:
        """Удаляет клиента. Бронирования в журнале остаются без изменений."""
        if not self._uow.customers.remove(name):
            return OperationResult.failure(
                ErrorCode.CUSTOMER_NOT_FOUND, "Customer not found.", name=name
            )
        self._logger.info("Customer removed", name=name)
        return OperationResult.success(message="Customer removed successfully.")

    def view_customer(self, name: str) -> OperationResult:
        """Возвращает данные клиента и историю его бронирований."""
        customer = self._uow.customers.find(name)
        if customer is None:
            return OperationResult.failure(
                ErrorCode.CUSTOMER_NOT_FOUND, "Customer not found.", name=name
            )
        return OperationResult.success(CustomerDTO.from_domain(customer))

    # Счета

    def set_rate(self, room_type: str, rate: float) -> OperationResult:
        """Устанавливает посуточный тариф для типа номера."""
        request, rejected = self._parse(SetRateRequest, room_type=room_type, rate=rate)
        if rejected is not None:
            return rejected

        self._uow.billing.set_rate(request.room_type, request.rate)
        self._logger.info("Rate set", room_type=request.room_type, rate=request.rate)
        return OperationResult.success(request.rate, "Rate set successfully.")

    def calculate_bill(
        self, booking_id: str, room_type: str, days: int
    ) -> OperationResult:
        """
        Рассчитывает счет как тариф * дни и сохраняет его.

        Наличие бронирования не проверяется. Повторный расчет
        перезаписывает прежнюю сумму.
        """
        request, rejected = self._parse(
            CalculateBillRequest, booking_id=booking_id, room_type=room_type, days=days
        )
        if rejected is not None:
            return rejected

        try:
            amount = self._uow.billing.calculate_bill(
                request.booking_id, request.room_type, request.days
            )
        except (DomainException, ValidationError) as e:
            self._logger.error(
                "Bill calculation failed", booking_id=request.booking_id, error=str(e)
            )
            return OperationResult.failure(
                ErrorCode.INVALID_ARGUMENT,
                "Bill could not be calculated.",
                booking_id=request.booking_id,
            )
        self._uow.event_bus.publish(
            BillCalculated(booking_id=request.booking_id, amount=amount)
        )
        return OperationResult.success(amount, f"Total Bill: {self.format_amount(amount)}")

    def generate_invoice(self, booking_id: str) -> OperationResult:
        """Возвращает ранее рассчитанный счет."""
        invoice = self._uow.billing.generate_invoice(booking_id)
        if invoice is None:
            return OperationResult.failure(
                ErrorCode.INVOICE_NOT_FOUND,
                "Invoice not found.",
                booking_id=booking_id,
            )
        return OperationResult.success(InvoiceDTO.from_domain(invoice))

    def format_amount(self, amount: float) -> str:
        return f"{self._settings.currency_symbol}{amount:.2f}"

    # Лист ожидания

    def queue_reservation(self, reservation_id: str) -> OperationResult:
        """Ставит заявку в конец очереди."""
        if not reservation_id:
            return OperationResult.failure(
                ErrorCode.INVALID_ARGUMENT, "Invalid input: reservation_id."
            )
        self._uow.reservations.add(reservation_id)
        return OperationResult.success(
            reservation_id, "Reservation added successfully."
        )

    def process_reservation(self) -> OperationResult:
        """Извлекает первую заявку из очереди."""
        reservation_id = self._uow.reservations.process()
        if reservation_id is None:
            return OperationResult.failure(
                ErrorCode.QUEUE_EMPTY, "No reservations to process"
            )
        return OperationResult.success(
            reservation_id, f"Processing reservation {reservation_id}."
        )
