# SPDX-License-Identifier: AGPL-3.0-only
# (c) 2025

import json
from pathlib import Path

from web3 import AsyncWeb3


class ChainClientError(Exception):
	pass


class FactoryResolutionError(ChainClientError):
	pass


class DeploymentError(ChainClientError):
	pass


class Signer:
	def __init__(self, address):
		self.address = address

	async def get_address(self):
		return self.address

	def __repr__(self):
		return f'Signer({self.address!r})'


class DeployedContract:
	"""A contract-creation transaction that has been sent but maybe not yet mined."""

	def __init__(self, w3, name, tx_hash):
		self.w3 = w3
		self.name = name
		self.tx_hash = tx_hash
		self._address = None

	async def wait_for_deployment(self):
		receipt = await self.w3.eth.wait_for_transaction_receipt(self.tx_hash)
		if receipt['status'] != 1:
			raise DeploymentError(f'{self.name} deployment reverted (transaction {self.tx_hash.hex()})')
		if receipt['contractAddress'] is None:
			raise DeploymentError(f'{self.name} deployment receipt has no contract address (transaction {self.tx_hash.hex()})')
		self._address = receipt['contractAddress']
		return self

	async def get_address(self):
		if self._address is None:
			await self.wait_for_deployment()
		return self._address


class ContractFactory:
	def __init__(self, w3, name, abi, bytecode, signer):
		self.w3 = w3
		self.name = name
		self.signer = signer
		self.contract = w3.eth.contract(abi=abi, bytecode=bytecode)

	async def deploy(self, *args):
		tx_hash = await self.contract.constructor(*args).transact({'from': self.signer.address})
		return DeployedContract(self.w3, self.name, tx_hash)


def find_artifact(artifacts_dir, name):
	"""Locate `<name>.json` below a Hardhat artifacts directory (build-info is skipped)."""
	artifacts_dir = Path(artifacts_dir)
	if not artifacts_dir.is_dir():
		raise FactoryResolutionError(f'Artifacts directory {str(artifacts_dir)!r} does not exist. Compile the contracts first.')

	matches = sorted(
		p for p in artifacts_dir.rglob(f'{name}.json')
		if 'build-info' not in p.relative_to(artifacts_dir).parts
	)
	match matches:
		case []:
			raise FactoryResolutionError(f'Artifact for contract {name!r} not found in {str(artifacts_dir)!r}.')
		case [path]:
			return path
		case _:
			raise FactoryResolutionError(f'Multiple artifacts for contract {name!r}: {", ".join(str(p) for p in matches)}')


def load_artifact(path):
	try:
		with open(path, 'r') as f:
			data = json.load(f)
	except (OSError, json.JSONDecodeError) as e:
		raise FactoryResolutionError(f'Could not read artifact {str(path)!r}: {e}') from e

	try:
		abi = data['abi']
		bytecode = data['bytecode']
	except (KeyError, TypeError) as e:
		raise FactoryResolutionError(f'Artifact {str(path)!r} is missing {e}.') from e

	# Foundry stores the bytecode as {"object": "0x..."}
	if isinstance(bytecode, dict):
		bytecode = bytecode.get('object', '')
	if not isinstance(bytecode, str) or bytecode in ('', '0x'):
		raise FactoryResolutionError(f'Artifact {str(path)!r} has no bytecode (abstract contract or interface?).')

	return abi, bytecode


class ChainClient:
	def __init__(self, w3, artifacts_dir='artifacts'):
		self.w3 = w3
		self.artifacts_dir = Path(artifacts_dir)

	async def get_signers(self):
		return [Signer(a) for a in await self.w3.eth.accounts]

	async def get_contract_factory(self, name):
		abi, bytecode = load_artifact(find_artifact(self.artifacts_dir, name))
		signer, *_ = await self.get_signers()
		return ContractFactory(self.w3, name, abi, bytecode, signer)


def connect(host='localhost', port=8545, artifacts_dir='artifacts'):
	w3 = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(f'http://{host}:{port}'))
	return ChainClient(w3, artifacts_dir)


def add_connection_arguments(parser):
	parser.add_argument('--host', default='localhost', metavar='ADDRESS', help='The host to connect to. Default: %(default)s')
	parser.add_argument('--port', type=int, default=8545, metavar='NUMBER', help='The port number to use. Default: %(default)s')
	parser.add_argument('--artifacts', default='artifacts', metavar='PATH', help='The directory holding the compiled contract artifacts. Default: %(default)s')
