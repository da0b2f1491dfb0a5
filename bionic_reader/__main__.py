"""Package entry point for ``python -m bionic_reader``.

WHY: Users run the annotator as ``python -m bionic_reader article.txt``
for CLI mode, or ``python -m bionic_reader --serve`` to start the HTTP
API.

RULES:
- ``--serve`` starts the FastAPI app under uvicorn
- Without ``--serve``, falls through to the CLI
"""

import sys

if __name__ == "__main__":
    if "--serve" in sys.argv:
        from bionic_reader.server.app import run_api
        run_api()
    else:
        from bionic_reader.cli import main
        main()
