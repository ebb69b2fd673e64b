"""Application layer interfaces (Ports)"""

from box_office.service.ticketing.app.interface.i_show_repo import IShowRepo
from box_office.service.ticketing.app.interface.i_ticket_repo import ITicketRepo
