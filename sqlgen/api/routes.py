from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse, StreamingResponse
from typing import Dict, Any, List, Tuple

from sqlgen import config  # Global config
from sqlgen.services.crud_generation import GenerationOrchestrator, SUPPORTED_DIALECTS, parse_create_table
from sqlgen.services.crud_generation.utils.result_formatter import create_result_dictionary
from sqlgen.utils.file_utils import create_zip_from_scripts, safe_file_stem, script_file_name
from sqlgen.utils.logger import setup_logger

api_router = APIRouter(prefix='/api/v1')

# Setup logger for API
logger = setup_logger('api_routes')


def _is_pro(request: Request) -> bool:
    """True when the request carries the entitlement cookie."""
    ent_cfg = config.get('entitlement', {})
    cookie_name = ent_cfg.get('cookie_name', 'SQLGen_Pro')
    cookie_value = str(ent_cfg.get('cookie_value', '1'))
    return request.cookies.get(cookie_name) == cookie_value


def _read_generation_request(payload: Dict[str, Any], request: Request) -> Tuple[str, List[str], bool, bool]:
    """Validate a generate payload and apply the Pro gate to the feature flags."""
    if not payload:
        raise ValueError('No JSON data provided')

    create_sql = payload.get('create_sql')
    if not isinstance(create_sql, str):
        raise ValueError('Missing required field: create_sql (string)')

    targets = payload.get('targets') or []
    if not isinstance(targets, list) or not all(isinstance(t, str) for t in targets):
        raise ValueError('targets must be a list of dialect names')

    include_procedures = payload.get('include_procedures', True)
    include_diff = payload.get('include_diff', True)
    if not isinstance(include_procedures, bool) or not isinstance(include_diff, bool):
        raise ValueError('include_procedures and include_diff must be true or false')

    if not _is_pro(request):
        if include_procedures or include_diff:
            logger.info("Pro features requested without entitlement cookie; disabling procedures and diff.")
        include_procedures = False
        include_diff = False

    return create_sql, targets, include_procedures, include_diff


@api_router.get('/')
def root():
    return JSONResponse({"message": "API is running"})


@api_router.get('/dialects')
def list_dialects():
    return JSONResponse({"dialects": SUPPORTED_DIALECTS})


@api_router.post('/sql/parse')
def parse_sql_endpoint(payload: Dict[str, Any] = Body(...)):
    """Return the parsed table description without generating anything."""
    create_sql = (payload or {}).get('create_sql')
    if not isinstance(create_sql, str):
        return JSONResponse({'error': 'Missing required field: create_sql (string)'}, status_code=400)

    try:
        table = parse_create_table(create_sql)
        result = create_result_dictionary(
            "success" if table.columns else "partial_success",
            f"Parsed {len(table.columns)} column(s) from table {table.name}.",
            table,
            {},
        )
        return JSONResponse({k: result[k] for k in ('status', 'message', 'table')})
    except Exception as e:
        logger.error(f"Unexpected error while parsing: {e}", exc_info=True)
        return JSONResponse({'error': 'An internal server error occurred.', 'details': str(e)}, status_code=500)


@api_router.post('/sql/generate')
def generate_sql_endpoint(request: Request, payload: Dict[str, Any] = Body(...)):
    try:
        create_sql, targets, include_procedures, include_diff = _read_generation_request(payload, request)
    except ValueError as ve:
        return JSONResponse({'error': str(ve)}, status_code=400)

    try:
        orchestrator = GenerationOrchestrator(
            targets,
            include_procedures=include_procedures,
            include_diff=include_diff,
        )
        result = orchestrator.run(create_sql)
        result['pro'] = _is_pro(request)
        return JSONResponse(result)
    except Exception as e:
        logger.error(f"Unexpected error during generation: {e}", exc_info=True)
        return JSONResponse({'error': 'An internal server error occurred.', 'details': str(e)}, status_code=500)


@api_router.post('/sql/generate/download')
def download_sql_endpoint(request: Request, payload: Dict[str, Any] = Body(...)):
    """Same as /sql/generate but returns a ZIP with one .sql file per dialect."""
    try:
        create_sql, targets, include_procedures, include_diff = _read_generation_request(payload, request)
    except ValueError as ve:
        return JSONResponse({'error': str(ve)}, status_code=400)

    try:
        orchestrator = GenerationOrchestrator(
            targets,
            include_procedures=include_procedures,
            include_diff=include_diff,
            syntax_check=False,
        )
        result = orchestrator.run(create_sql)
        table_name = result['table']['name']
        scripts = {
            script_file_name(table_name, dialect): text
            for dialect, text in result['results'].items()
        }
        zip_buffer = create_zip_from_scripts(scripts)
        archive_name = f"{safe_file_stem(table_name, 'table')}_scripts.zip"
        logger.info(f"Prepared {len(scripts)} script(s) for download as {archive_name}")
        return StreamingResponse(
            zip_buffer,
            media_type='application/zip',
            headers={'Content-Disposition': f'attachment; filename="{archive_name}"'},
        )
    except Exception as e:
        logger.error(f"Unexpected error while building download: {e}", exc_info=True)
        return JSONResponse({'error': 'An internal server error occurred.', 'details': str(e)}, status_code=500)
