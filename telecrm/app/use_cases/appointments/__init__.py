"""
Appointment Use Cases
"""

from .create_appointment_use_case import CreateAppointmentUseCase
from .delete_appointment_use_case import DeleteAppointmentUseCase
from .dtos import AppointmentInfo, CreateAppointmentCommand, UpdateAppointmentCommand
from .get_appointment_use_case import GetAppointmentUseCase
from .list_appointments_use_case import ListAppointmentsUseCase
from .update_appointment_use_case import UpdateAppointmentUseCase

__all__ = [
    "CreateAppointmentUseCase",
    "GetAppointmentUseCase",
    "ListAppointmentsUseCase",
    "UpdateAppointmentUseCase",
    "DeleteAppointmentUseCase",
    "AppointmentInfo",
    "CreateAppointmentCommand",
    "UpdateAppointmentCommand",
]
