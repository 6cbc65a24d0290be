import uuid

import pytest

from bountysvc.db import DbBounty
from bountysvc.mapper import to_db_params, to_db_update_params, to_domain
from bountysvc.model import Bounty


def test_to_domain_converts_fields():
    bounty_id = uuid.uuid4()
    result = to_domain(DbBounty(id=bounty_id, title="T", description="D", points=7))
    assert result == Bounty(id=str(bounty_id), title="T", description="D", points=7)


def test_to_domain_null_description_becomes_empty():
    result = to_domain(DbBounty(id=uuid.uuid4(), title="T", description=None, points=0))
    assert result.description == ""


def test_to_db_params_empty_description_becomes_null():
    params = to_db_params(Bounty(id=str(uuid.uuid4()), title="T", description="", points=1))
    assert params.description is None


def test_to_db_params_round_trip():
    bounty = Bounty(id=str(uuid.uuid4()), title="T", description="D", points=3)
    params = to_db_params(bounty)
    row = DbBounty(id=params.id, title=params.title, description=params.description, points=params.points)
    assert to_domain(row) == bounty


def test_to_db_update_params_round_trip():
    bounty = Bounty(id=str(uuid.uuid4()), title="U", description="", points=4)
    params = to_db_update_params(bounty)
    row = DbBounty(id=params.id, title=params.title, description=params.description, points=params.points)
    assert to_domain(row) == bounty


@pytest.mark.parametrize("convert", [to_db_params, to_db_update_params])
@pytest.mark.parametrize("bad_id", ["", "invalid-uuid", "1"])
def test_invalid_id_raises(convert, bad_id):
    with pytest.raises(ValueError):
        convert(Bounty(id=bad_id, title="T"))


@pytest.mark.parametrize("convert", [to_db_params, to_db_update_params])
def test_points_wrap_to_32_bits(convert):
    params = convert(Bounty(id=str(uuid.uuid4()), points=2**31))
    assert params.points == -(2**31)