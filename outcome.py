# SPDX-License-Identifier: AGPL-3.0-only
# (c) 2025

import asyncio
import dataclasses
import functools
import sys
import traceback


@dataclasses.dataclass(frozen=True)
class Success:
	value: object


@dataclasses.dataclass(frozen=True)
class Failure:
	error: Exception


def capture(procedure):
	"""Make an async procedure return Success/Failure instead of raising."""
	@functools.wraps(procedure)
	async def wrapper(*args, **kwargs):
		try:
			return Success(await procedure(*args, **kwargs))
		except Exception as e:
			return Failure(e)
	return wrapper


def run(procedure, client, file=None):
	"""Run `procedure(client)` to completion and return the process exit status."""
	match asyncio.run(procedure(client)):
		case Success():
			return 0
		case Failure(error):
			traceback.print_exception(error, file=sys.stderr if file is None else file)
			return 1
