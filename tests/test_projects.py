"""Tests for project records and their containment rules."""

import pytest

from app.core.errors import InvalidArgument, NotFound
from app.crud.projects import create_project, get_project, update_project
from app.crud.tickets import create_ticket, list_project_tickets
from app.models.project import Project
from app.services.hierarchy import SqlHierarchyReader


def test_create_project_persists_one_row(db_session, make_client):
    client = make_client()
    before = db_session.query(Project).count()

    create_project(db_session, {"name": "New Project", "client_id": client.id})

    assert db_session.query(Project).count() == before + 1


def test_to_string_is_project_name(make_project):
    project = make_project(name="New Project")

    assert str(project) == "New Project"


def test_project_belongs_to_client(make_client, make_project):
    client = make_client("Acme")
    project = make_project(client=client)

    assert project.client is client
    assert client.projects == [project]


def test_name_is_required(db_session, make_client):
    client = make_client()
    with pytest.raises(InvalidArgument):
        create_project(db_session, {"name": "  ", "client_id": client.id})


def test_client_is_required_and_must_exist(db_session):
    with pytest.raises(InvalidArgument):
        create_project(db_session, {"name": "Orphan"})
    with pytest.raises(NotFound):
        create_project(db_session, {"name": "Orphan", "client_id": 9999})


def test_name_is_unique_per_client(db_session, make_client, make_project):
    client_a = make_client()
    client_b = make_client()
    make_project(name="Website", client=client_a)

    with pytest.raises(InvalidArgument):
        create_project(db_session, {"name": "Website", "client_id": client_a.id})
    other = create_project(db_session, {"name": "Website", "client_id": client_b.id})
    assert other.client_id == client_b.id


def test_update_cannot_collide_with_sibling(db_session, make_client, make_project):
    client = make_client()
    make_project(name="Alpha", client=client)
    beta = make_project(name="Beta", client=client)

    with pytest.raises(InvalidArgument):
        update_project(db_session, beta, {"name": "Alpha"})
    renamed = update_project(db_session, beta, {"name": "Gamma"})
    assert renamed.name == "Gamma"


def test_project_has_many_tickets(db_session, make_project):
    project = make_project()
    first = create_ticket(db_session, project, {"name": "Setup"})
    second = create_ticket(db_session, project, {"name": "Launch"})

    loaded = get_project(db_session, project.id)
    assert loaded.tickets == [first, second]
    assert list_project_tickets(db_session, project.id) == [first, second]


def test_reader_raises_not_found_for_missing_records(db_session):
    reader = SqlHierarchyReader(db_session)

    with pytest.raises(NotFound):
        reader.get_project(404)
    with pytest.raises(NotFound):
        reader.get_ticket(404)
    with pytest.raises(NotFound):
        reader.get_work_unit(404)
    with pytest.raises(NotFound):
        reader.get_client(404)
