"""
Unit tests for the SQLAlchemy event repositories.

The session factory is replaced with a mock session; statements are inspected
instead of executed.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import Text
from sqlalchemy.dialects import postgresql
from sqlalchemy.schema import CreateTable

from src.service.event.domain.entity.event_entity import EventEntity
from src.service.event.driven_adapter.model.event_model import EventModel
from src.service.event.driven_adapter.model.session_model import SessionModel
from src.service.event.driven_adapter.repo.event_command_repo_impl import EventCommandRepoImpl
from src.service.event.driven_adapter.repo.event_query_repo_impl import EventQueryRepoImpl


NOW = datetime(2025, 1, 1, tzinfo=timezone.utc)


def _event_model(**overrides) -> EventModel:
    fields = {
        'id': 'e-1',
        'title': 'Launch Party',
        'description': 'Product launch',
        'location': {'house_number': '12', 'ward': 'W', 'district': 'D', 'province': 'P'},
        'event_type': 'party',
        'image': '',
        'status': 'pending',
        'organizer_id': 'org-42',
        'created_at': NOW,
        'updated_at': NOW,
    }
    fields.update(overrides)
    return EventModel(**fields)


def _session_factory(session: AsyncMock):
    @asynccontextmanager
    async def factory():
        yield session

    return factory


def _result(*, one=None, many=None) -> MagicMock:
    result = MagicMock()
    result.scalar_one.return_value = one
    result.scalar_one_or_none.return_value = one
    result.scalars.return_value.all.return_value = many or []
    return result


def _sql(session: AsyncMock) -> str:
    return str(session.execute.call_args.args[0]).upper()


@pytest.mark.unit
class TestEventCommandRepo:
    @pytest.mark.asyncio
    async def test_create_inserts_and_commits(self) -> None:
        session = AsyncMock()
        session.execute.return_value = _result(one=_event_model())
        repo = EventCommandRepoImpl(session_factory=_session_factory(session))
        event = EventEntity(
            id='e-1',
            title='Launch Party',
            description='Product launch',
            location={'house_number': '12', 'ward': 'W', 'district': 'D', 'province': 'P'},
            event_type='party',
            organizer_id='org-42',
        )

        created = await repo.create(event=event)

        assert 'INSERT INTO EVENT' in _sql(session)
        session.commit.assert_awaited_once()
        assert created.id == 'e-1'
        assert created.created_at == NOW

    @pytest.mark.asyncio
    async def test_update_returns_merged_row(self) -> None:
        session = AsyncMock()
        session.execute.return_value = _result(one=_event_model(status='published'))
        repo = EventCommandRepoImpl(session_factory=_session_factory(session))

        updated = await repo.update_by_id(event_id='e-1', patch={'status': 'published'})

        assert _sql(session).startswith('UPDATE EVENT')
        session.commit.assert_awaited_once()
        assert updated is not None and updated.status == 'published'

    @pytest.mark.asyncio
    async def test_update_missing_row_returns_none(self) -> None:
        session = AsyncMock()
        session.execute.return_value = _result(one=None)
        repo = EventCommandRepoImpl(session_factory=_session_factory(session))

        assert await repo.update_by_id(event_id='missing', patch={'title': 'x'}) is None

    @pytest.mark.asyncio
    async def test_empty_patch_reads_without_writing(self) -> None:
        session = AsyncMock()
        session.execute.return_value = _result(one=_event_model())
        repo = EventCommandRepoImpl(session_factory=_session_factory(session))

        event = await repo.update_by_id(event_id='e-1', patch={})

        assert _sql(session).startswith('SELECT')
        session.commit.assert_not_awaited()
        assert event is not None and event.title == 'Launch Party'


@pytest.mark.unit
class TestEventQueryRepo:
    @pytest.mark.asyncio
    async def test_find_applies_both_filters(self) -> None:
        session = AsyncMock()
        session.execute.return_value = _result(many=[_event_model()])
        repo = EventQueryRepoImpl(session_factory=_session_factory(session))

        events = await repo.find(event_type='party', organizer_id='org-42')

        sql = _sql(session)
        assert 'EVENT.EVENT_TYPE' in sql
        assert 'EVENT.ORGANIZER_ID' in sql
        assert [e.id for e in events] == ['e-1']

    @pytest.mark.asyncio
    async def test_find_without_filters_has_no_where(self) -> None:
        session = AsyncMock()
        session.execute.return_value = _result(many=[])
        repo = EventQueryRepoImpl(session_factory=_session_factory(session))

        assert await repo.find() == []
        assert 'WHERE' not in _sql(session)

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self) -> None:
        session = AsyncMock()
        session.execute.return_value = _result(one=None)
        repo = EventQueryRepoImpl(session_factory=_session_factory(session))

        assert await repo.get_by_id(event_id='missing') is None

    @pytest.mark.asyncio
    async def test_list_sessions_maps_rows(self) -> None:
        session = AsyncMock()
        session.execute.return_value = _result(
            many=[SessionModel(id='s1', event_id='e-1', name='Matinee', start_time=NOW)]
        )
        repo = EventQueryRepoImpl(session_factory=_session_factory(session))

        sessions = await repo.list_sessions(event_id='e-1')

        assert 'EVENT_SESSION.EVENT_ID' in _sql(session)
        assert sessions[0].name == 'Matinee'
        assert sessions[0].start_time == NOW


@pytest.mark.unit
class TestEventTable:
    @pytest.mark.parametrize('column', ['title', 'event_type', 'status', 'image'])
    def test_free_form_labels_are_unbounded(self, column: str) -> None:
        column_type = EventModel.__table__.c[column].type

        assert isinstance(column_type, Text)
        assert column_type.length is None

    def test_postgres_ddl_has_no_varchar_limit_on_status_or_type(self) -> None:
        ddl = str(CreateTable(EventModel.__table__).compile(dialect=postgresql.dialect()))

        assert 'status TEXT NOT NULL' in ddl
        assert 'event_type TEXT NOT NULL' in ddl

    @pytest.mark.asyncio
    async def test_long_status_label_is_sent_unchanged(self) -> None:
        label = 'awaiting-final-approval-from-venue-and-sponsors'
        session = AsyncMock()
        session.execute.return_value = _result(one=_event_model(status=label))
        repo = EventCommandRepoImpl(session_factory=_session_factory(session))

        updated = await repo.update_by_id(event_id='e-1', patch={'status': label})

        statement = session.execute.call_args.args[0]
        assert label in statement.compile().params.values()
        assert updated is not None and updated.status == label
