# SPDX-License-Identifier: AGPL-3.0-only
# (c) 2025

import itertools

import pytest

from chain_client import Signer


class FakeContract:
	def __init__(self, address):
		self.address = address
		self.waited = False

	async def wait_for_deployment(self):
		self.waited = True
		return self

	async def get_address(self):
		return self.address


class FakeFactory:
	def __init__(self, addresses, error=None):
		self.addresses = addresses
		self.error = error
		self.calls = []

	async def deploy(self, *args):
		self.calls.append(args)
		if self.error is not None:
			raise self.error
		return FakeContract(next(self.addresses))


class FakeClient:
	def __init__(self, addresses=('0x5FbDB2315678afecb367f032d93F642f64180aa3',), signers=('0xABC',), deploy_error=None, factory_error=None):
		self.factory = FakeFactory(itertools.cycle(addresses), deploy_error)
		self.factory_error = factory_error
		self.signers = [Signer(a) for a in signers]
		self.requested = []

	async def get_contract_factory(self, name):
		self.requested.append(name)
		if self.factory_error is not None:
			raise self.factory_error
		return self.factory

	async def get_signers(self):
		return list(self.signers)


@pytest.fixture
def fake_client():
	return FakeClient


@pytest.fixture
def patch_connect(monkeypatch):
	import chain_client

	def patch(client):
		calls = []

		def connect(*args):
			calls.append(args)
			return client

		monkeypatch.setattr(chain_client, 'connect', connect)
		return calls
	return patch
