import pytest

from box_office.platform.exception.exceptions import NotFoundError
from box_office.platform.logging.loguru_io import Logger
from box_office.platform.logging.loguru_io_config import _parse_http_status_level
from box_office.platform.logging.loguru_io_utils import normalize_args_kwargs


@Logger.io
def add(a, b):
    return a + b


@Logger.io
def countdown(start):
    while start > 0:
        received = yield start
        start = received if received is not None else start - 1
    return 'done'


@Logger.io
async def find_ticket(ticket_id):
    raise NotFoundError(message=f'Ticket {ticket_id} not found')


@Logger.io(reraise=False)
def swallow():
    raise ValueError('boom')


@pytest.mark.unit
class TestLoggerIo:
    def test_sync_return_value_passes_through(self):
        assert add(2, 3) == 5

    def test_extra_keyword_injections_are_dropped(self):
        assert add(1, 2, current_actor='ignored') == 3

    def test_generator_is_wrapped_and_forwards_next_and_send(self):
        gen = countdown(3)

        assert next(gen) == 3
        assert gen.send(1) == 1
        with pytest.raises(StopIteration):
            next(gen)

    def test_generator_iterates_like_the_original(self):
        assert list(countdown(3)) == [3, 2, 1]

    @pytest.mark.asyncio
    async def test_async_errors_are_reraised(self):
        with pytest.raises(NotFoundError):
            await find_ticket(42)

    def test_reraise_false_returns_none(self):
        assert swallow() is None


@pytest.mark.unit
def test_normalize_args_kwargs_trims_unknown_arguments():
    def target(a, *, b):
        return a, b

    args, kwargs = normalize_args_kwargs(target, 1, 2, b=3, c=4)

    assert args == (1,)
    assert kwargs == {'b': 3}


@pytest.mark.unit
@pytest.mark.parametrize(
    ('message', 'level'),
    [
        ('127.0.0.1:51234 - "PUT /api/ticket/1/sell HTTP/1.1" 200', 'SUCCESS'),
        ('127.0.0.1:51234 - "PUT /api/ticket/1/sell HTTP/1.1" 409', 'ERROR'),
        ('127.0.0.1:51234 - "GET /health HTTP/1.1" 503', 'CRITICAL'),
        ('Application startup complete.', None),
    ],
)
def test_access_log_level_follows_status_code(message, level):
    assert _parse_http_status_level(message) == level
