import logging
import sys
from typing import Optional

from file_agent.container import DependencyContainer, container
from file_agent.exceptions import BaseAppError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def main(deps: Optional[DependencyContainer] = None) -> int:
    deps = deps or container
    try:
        settings = deps.get_settings()
        # Logs go to stderr so they never mix with the agent's stdout lines
        logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, stream=sys.stderr)
        agent_loop = deps.get_agent_loop()
    except BaseAppError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return agent_loop.run()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
