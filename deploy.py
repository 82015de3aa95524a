# SPDX-License-Identifier: AGPL-3.0-only
# (c) 2025

import argparse
import sys

import chain_client
from outcome import capture, run


CONTRACT_NAME = 'CommitReveal'

COMMIT_DURATION = 3 * 60  # seconds
REVEAL_DURATION = 3 * 60  # seconds
MAX_CHOICE = 3  # choices 1, 2 and 3


@capture
async def deploy_commit_reveal(client):
	factory = await client.get_contract_factory(CONTRACT_NAME)

	contract = await factory.deploy(
		COMMIT_DURATION,
		REVEAL_DURATION,
		MAX_CHOICE,
	)

	await contract.wait_for_deployment()

	address = await contract.get_address()
	print(f'{CONTRACT_NAME} deployed to: {address}')
	return address


def main(argv=None):
	parser0 = argparse.ArgumentParser(allow_abbrev=False, description=f'Deploy the {CONTRACT_NAME} contract.')
	chain_client.add_connection_arguments(parser0)

	args0 = parser0.parse_args(argv)

	client = chain_client.connect(args0.host, args0.port, args0.artifacts)
	sys.exit(run(deploy_commit_reveal, client))


if __name__ == '__main__':
	main()
