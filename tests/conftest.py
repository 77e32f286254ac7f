"""Global test fixtures."""

import logfire

# Keep spans local: nothing is exported during tests
logfire.configure(send_to_logfire=False, console=False)
