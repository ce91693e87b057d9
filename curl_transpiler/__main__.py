from __future__ import annotations

from curl_transpiler.main import main

raise SystemExit(main())
