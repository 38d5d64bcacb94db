"""Tests for project access decisions and scoped project listings."""

import pytest

from app.core.errors import InvalidArgument
from app.core.roles import ResourceRef
from app.crud.projects import delete_project, list_projects
from app.crud.roles import grant_role, revoke_roles_for
from app.models.role import Role
from app.services.access import AccessEvaluator
from app.services.project_scope import projects_for_user, projects_for_user_and_role
from app.services.role_store import SqlRoleStore, StaticRoleStore


@pytest.fixture()
def evaluator(db_session):
    return AccessEvaluator(SqlRoleStore(db_session))


def test_allows_access_for_admin_scoped_role_and_plain_user(db_session, evaluator, make_project, make_user):
    project = make_project()

    admin = make_user()
    grant_role(db_session, admin, "admin")
    plain = make_user()
    client_user = make_user()
    grant_role(db_session, client_user, "client", project)

    assert evaluator.allows_access(project, admin) is True
    assert evaluator.allows_access(project, plain) is False
    assert evaluator.allows_access(project, client_user) is True


def test_admin_reaches_every_project(db_session, evaluator, make_project, make_user):
    projects = [make_project() for _ in range(3)]
    admin = make_user()
    grant_role(db_session, admin, "admin")

    assert all(evaluator.allows_access(project, admin) for project in projects)


def test_scoped_role_only_opens_its_own_project(db_session, evaluator, make_project, make_user):
    project_a = make_project()
    project_b = make_project()
    user = make_user()
    grant_role(db_session, user, "developer", project_a)

    assert evaluator.allows_access(project_a, user) is True
    assert evaluator.allows_access(project_b, user) is False


def test_admin_role_scoped_to_other_project_is_not_global(db_session, evaluator, make_project, make_user):
    project_a = make_project()
    project_b = make_project()
    user = make_user()
    grant_role(db_session, user, "admin", project_a)

    assert evaluator.allows_access(project_a, user) is True
    assert evaluator.allows_access(project_b, user) is False


def test_global_non_admin_role_grants_nothing(db_session, evaluator, make_project, make_user):
    project = make_project()
    user = make_user()
    grant_role(db_session, user, "client")

    assert evaluator.allows_access(project, user) is False


def test_missing_user_or_project_is_rejected(evaluator, make_project, make_user):
    project = make_project()
    with pytest.raises(InvalidArgument):
        evaluator.allows_access(project, None)
    with pytest.raises(InvalidArgument):
        evaluator.allows_access(None, make_user())


def test_evaluator_accepts_any_role_store(make_project, make_user):
    project = make_project()
    other = make_project()
    user = make_user()
    role = Role(name="developer")
    role.authorizable = ResourceRef.for_project(project)
    store = StaticRoleStore({user.id: [role]})
    evaluator = AccessEvaluator(store)

    assert evaluator.allows_access(project, user) is True
    assert evaluator.allows_access(other, user) is False


def test_for_user_returns_assigned_projects(db_session, make_project, make_user):
    user = make_user()
    project1 = make_project()
    project2 = make_project()
    revoke_roles_for(db_session, user, project2)
    grant_role(db_session, user, "developer", project1)

    visible = projects_for_user(db_session, user)

    assert project1 in visible
    assert project2 not in visible


def test_for_user_matches_filtering_by_allows_access(db_session, evaluator, make_project, make_user):
    projects = [make_project() for _ in range(4)]
    admin = make_user()
    grant_role(db_session, admin, "admin")
    mixed = make_user()
    grant_role(db_session, mixed, "client")
    grant_role(db_session, mixed, "client", projects[1])
    grant_role(db_session, mixed, "developer", projects[1])
    grant_role(db_session, mixed, "developer", projects[3])
    nobody = make_user()

    for user in (admin, mixed, nobody):
        expected = [p for p in list_projects(db_session) if evaluator.allows_access(p, user)]
        assert projects_for_user(db_session, user) == expected

    assert projects_for_user(db_session, nobody) == []
    assert [p.id for p in projects_for_user(db_session, mixed)] == [projects[1].id, projects[3].id]


def test_for_user_and_role_returns_scoped_projects(db_session, make_project, make_user):
    project = make_project()
    user = make_user()
    grant_role(db_session, user, "client", project)

    assert projects_for_user_and_role(db_session, user, "client") == [project]


def test_for_user_and_role_ignores_global_roles(db_session, make_project, make_user):
    scoped = make_project()
    make_project()
    user = make_user()
    grant_role(db_session, user, "client")
    grant_role(db_session, user, "admin")
    grant_role(db_session, user, "developer", scoped)

    assert projects_for_user_and_role(db_session, user, "client") == []
    assert projects_for_user_and_role(db_session, user, "developer") == [scoped]


def test_scoped_queries_require_a_user(db_session):
    with pytest.raises(InvalidArgument):
        projects_for_user(db_session, None)
    with pytest.raises(InvalidArgument):
        projects_for_user_and_role(db_session, None, "client")


def test_deleting_a_project_revokes_its_roles(db_session, evaluator, make_project, make_user):
    project = make_project()
    user = make_user()
    grant_role(db_session, user, "client", project)

    delete_project(db_session, project)

    assert SqlRoleStore(db_session).roles_of(user) == []
    assert projects_for_user(db_session, user) == []


def test_grant_role_is_idempotent(db_session, make_project, make_user):
    project = make_project()
    user = make_user()
    first = grant_role(db_session, user, "client", project)
    second = grant_role(db_session, user, "client", project)

    assert first.id == second.id
    assert len(user.roles) == 1
    assert user.roles_by_name() == {"client": [first]}


def test_roles_do_not_survive_a_direct_project_delete(db_session, evaluator, make_client, make_project, make_user):
    client = make_client()
    doomed = make_project(client=client)
    doomed_id = doomed.id
    user = make_user()
    grant_role(db_session, user, "client", doomed)

    db_session.delete(doomed)
    db_session.commit()
    successor = make_project(client=client)

    assert successor.id != doomed_id
    assert SqlRoleStore(db_session).roles_of(user) == []
    assert evaluator.allows_access(successor, user) is False
    assert projects_for_user(db_session, user) == []


def test_configured_admin_role_name_is_case_insensitive(db_session, make_project, make_user):
    project = make_project()
    admin = make_user()
    grant_role(db_session, admin, "Admin")

    evaluator = AccessEvaluator(SqlRoleStore(db_session), admin_role="Admin")

    assert admin.roles[0].name == "admin"
    assert evaluator.allows_access(project, admin) is True
    assert projects_for_user(db_session, admin, admin_role=" ADMIN ") == [project]
