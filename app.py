"""Run the SQLGen API: ``python app.py`` or ``uvicorn sqlgen:app --port 5001``."""

import uvicorn

from sqlgen import config


if __name__ == "__main__":
    api_cfg = config.get('api', {})
    uvicorn.run(
        "sqlgen:app",
        host=api_cfg.get('host', "127.0.0.1"),
        port=api_cfg.get('port', 5001),
        reload=api_cfg.get('debug', False),
    )
