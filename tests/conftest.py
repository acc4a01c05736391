import sys
import pathlib

import pytest

# Ensure project root is on sys.path so 'import solcver' works when pytest runs from
# different working directories or when running individual tests.
_ROOT = pathlib.Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from solcver import create_app
from solcver.catalog import CompilersList


SAMPLE_RELEASES = {
    '0.8.4': 'soljson-v0.8.4+commit.c7e474f2.js',
    '0.5.9': 'soljson-v0.5.9+commit.e560f70d.js',
    '0.5.8': 'soljson-v0.5.8+commit.23d335f2.js',
    '0.4.26': 'soljson-v0.4.26+commit.4563c3fc.js',
    '0.4.10': 'soljson-v0.4.10+commit.f0d539ae.js',
    '0.4.7': 'soljson-v0.4.7+commit.822622cf.js',
    '0.4.6': 'soljson-v0.4.6+commit.2dabbdf0.js',
    '0.3.6': 'soljson-v0.3.6+commit.3fc68da5.js',
    '0.1.1': '',
}


@pytest.fixture
def sample_catalog():
    return CompilersList(releases=dict(SAMPLE_RELEASES), latest_release='0.8.4')


@pytest.fixture
def sample_catalog_json():
    return {'builds': [], 'releases': dict(SAMPLE_RELEASES), 'latestRelease': '0.8.4'}


@pytest.fixture
def client():
    app = create_app()
    app.testing = True
    return app.test_client()
