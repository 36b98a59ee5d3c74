import re

import pytest

from internify.core.errors import IdentityGenerationError
from internify.services import identity
from internify.services.identity import generate_certificate_identity

CERT_RE = re.compile(r"^CERT-\d+-[0-9A-Z]{9}$")


def test_certificate_id_shape():
    internal_id, certificate_id = generate_certificate_identity()
    assert CERT_RE.match(certificate_id)
    assert len(internal_id) == 36
    assert internal_id != certificate_id


def test_certificate_id_carries_creation_time(monkeypatch):
    monkeypatch.setattr(identity, "_epoch_millis", lambda: 1705312800000)
    ident = generate_certificate_identity()
    assert ident.certificate_id.startswith("CERT-1705312800000-")


def test_no_collisions_in_large_sample():
    n = 5000
    idents = [generate_certificate_identity() for _ in range(n)]
    assert len({i.certificate_id for i in idents}) == n
    assert len({i.internal_id for i in idents}) == n


def test_randomness_failure_is_fatal(monkeypatch):
    def boom(_alphabet):
        raise OSError("no entropy")

    monkeypatch.setattr(identity.secrets, "choice", boom)
    with pytest.raises(IdentityGenerationError):
        generate_certificate_identity()
