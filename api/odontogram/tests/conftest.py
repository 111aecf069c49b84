# api/odontogram/tests/conftest.py
"""
Fixtures compartidas para tests del odontograma.
"""
import uuid

import pytest
from django.contrib.auth import get_user_model
from django.core.cache import cache

User = get_user_model()


@pytest.fixture(autouse=True)
def limpiar_cache():
    """La caché locmem sobrevive entre tests"""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def odontologo_user(db):
    """Usuario odontólogo para tests"""
    return User.objects.create_user(
        username='dr.garcia',
        email='garcia@plexident.com',
        password='testpass123',
        first_name='Carlos',
        last_name='García',
    )


@pytest.fixture
def paciente_id():
    return uuid.uuid4()


@pytest.fixture
def api_client():
    """Cliente API"""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def authenticated_client(api_client, odontologo_user):
    """Cliente API autenticado"""
    api_client.force_authenticate(user=odontologo_user)
    return api_client
