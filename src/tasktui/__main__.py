from __future__ import annotations

from tasktui.main import main


main()
