"""
RPC router for the inventory.

Every procedure is served from ``/rpc/<name>``:

- queries are read-only and answer ``GET``, with the JSON input in the
  ``input`` query parameter;
- mutations answer ``POST``, with the JSON input as the request body.

Responses are ``{"result": {"data": ...}}`` on success and
``{"error": {"code", "message", "fields"}}`` on failure.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from django.http import JsonResponse
from django.utils import timezone
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from . import handlers, schemas
from .exceptions import InputValidationError, InventoryError
from .serializers import serialize_device, serialize_relationship

logger = logging.getLogger('homelab.rpc')

QUERY = 'query'
MUTATION = 'mutation'


@dataclass(frozen=True)
class Procedure:
    """A named remote procedure binding an input schema to a resolver."""

    name: str
    kind: str
    resolver: Callable
    schema: Optional[type] = None

    def call(self, raw_input=None):
        if self.schema is None:
            return self.resolver()
        return self.resolver(schemas.validate(self.schema, raw_input))


class Router:
    """Registry of procedures, looked up by name."""

    def __init__(self):
        self._procedures: Dict[str, Procedure] = {}

    def _register(self, name, kind, schema):
        def decorator(resolver):
            if name in self._procedures:
                raise ValueError(f"Procedure {name!r} is already registered")
            self._procedures[name] = Procedure(name, kind, resolver, schema)
            return resolver
        return decorator

    def query(self, name, schema=None):
        return self._register(name, QUERY, schema)

    def mutation(self, name, schema=None):
        return self._register(name, MUTATION, schema)

    def get(self, name) -> Optional[Procedure]:
        return self._procedures.get(name)

    def call(self, name, raw_input=None) -> Any:
        """Validate ``raw_input`` and run the named procedure."""
        procedure = self.get(name)
        if procedure is None:
            raise KeyError(name)
        return procedure.call(raw_input)

    def __iter__(self):
        return iter(self._procedures.values())

    def __len__(self):
        return len(self._procedures)


router = Router()


@router.query('healthcheck')
def healthcheck():
    return {'status': 'ok', 'timestamp': timezone.now().isoformat()}


# ============== Devices ==============

@router.mutation('createDevice', schemas.CreateDeviceInput)
def create_device(data):
    return serialize_device(handlers.create_device(data))


@router.query('getDevices')
def get_devices():
    return [serialize_device(device) for device in handlers.get_devices()]


@router.query('getDeviceById', schemas.GetDeviceByIdInput)
def get_device_by_id(data):
    device = handlers.get_device_by_id(data['id'])
    return serialize_device(device) if device else None


@router.query('getDevicesByType', schemas.GetDevicesByTypeInput)
def get_devices_by_type(data):
    return [serialize_device(device) for device in handlers.get_devices_by_type(data['type'])]


@router.mutation('updateDevice', schemas.UpdateDeviceInput)
def update_device(data):
    device = handlers.update_device(data['id'], data['patch'])
    return serialize_device(device) if device else None


@router.mutation('deleteDevice', schemas.DeleteDeviceInput)
def delete_device(data):
    return {'success': handlers.delete_device(data['id'])}


# ============== Relationships ==============

@router.mutation('createDeviceRelationship', schemas.CreateDeviceRelationshipInput)
def create_device_relationship(data):
    return serialize_relationship(handlers.create_device_relationship(data))


@router.query('getAllDeviceRelationships')
def get_all_device_relationships():
    return [serialize_relationship(r) for r in handlers.get_all_device_relationships()]


@router.query('getDeviceRelationships', schemas.GetDeviceRelationshipsInput)
def get_device_relationships(data):
    relationships = handlers.get_device_relationships(
        device_id=data.get('device_id'),
        relationship_type=data.get('relationship_type'),
    )
    return [serialize_relationship(r) for r in relationships]


@router.mutation('updateDeviceRelationship', schemas.UpdateDeviceRelationshipInput)
def update_device_relationship(data):
    relationship = handlers.update_device_relationship(data['id'], data['patch'])
    return serialize_relationship(relationship) if relationship else None


@router.mutation('deleteDeviceRelationship', schemas.DeleteDeviceRelationshipInput)
def delete_device_relationship(data):
    return {'success': handlers.delete_device_relationship(data['id'])}


# ============== HTTP transport ==============

def error_response(code, message, status, fields=None):
    return JsonResponse({
        'error': {
            'code': code,
            'message': message,
            'fields': fields or {},
        }
    }, status=status)


class RPCIndexView(View):
    """List the registered procedures."""

    def get(self, request):
        return JsonResponse({
            'procedures': [
                {'name': procedure.name, 'kind': procedure.kind}
                for procedure in router
            ],
        })


@method_decorator(csrf_exempt, name='dispatch')
class RPCView(View):
    """Single endpoint multiplexing every procedure by name."""

    http_method_names = ['get', 'post', 'options']

    def get(self, request, procedure):
        return self._dispatch(procedure, QUERY, request.GET.get('input'))

    def post(self, request, procedure):
        return self._dispatch(procedure, MUTATION, request.body)

    def _dispatch(self, name, kind, raw_body):
        procedure = router.get(name)
        if procedure is None:
            return error_response('NOT_FOUND', f'No procedure named "{name}"', 404)
        if procedure.kind != kind:
            expected = 'GET' if procedure.kind == QUERY else 'POST'
            return error_response(
                'METHOD_NOT_SUPPORTED',
                f'"{name}" is a {procedure.kind}, use {expected}',
                405,
            )

        try:
            data = json.loads(raw_body) if raw_body else None
        except ValueError as e:
            return error_response('PARSE_ERROR', f'Malformed JSON input: {e}', 400)

        try:
            result = procedure.call(data)
        except InputValidationError as e:
            return error_response('BAD_REQUEST', str(e), 400, fields=e.errors)
        except InventoryError as e:
            logger.warning(f"{name} rejected: {e}")
            return error_response('BAD_REQUEST', str(e), 400)
        except Exception as e:
            logger.exception(f"{name} failed")
            return error_response('INTERNAL_SERVER_ERROR', str(e), 500)

        return JsonResponse({'result': {'data': result}})
