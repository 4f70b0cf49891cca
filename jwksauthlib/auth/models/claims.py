from typing import Any, Dict

# Verified token payload, passed through unmodified. No fixed schema:
# consumers read whichever of iss, sub, aud, exp, ... they need.
Claims = Dict[str, Any]
