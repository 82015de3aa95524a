# SPDX-License-Identifier: AGPL-3.0-only
# (c) 2025

import argparse
import sys

import chain_client
from outcome import capture, run


@capture
async def show_address(client):
	signers = await client.get_signers()
	deployer = signers[0]

	address = await deployer.get_address()
	print(f'Deploying with address: {address}')
	return address


def main(argv=None):
	parser0 = argparse.ArgumentParser(allow_abbrev=False, description='Print the address of the deploying account.')
	chain_client.add_connection_arguments(parser0)

	args0 = parser0.parse_args(argv)

	client = chain_client.connect(args0.host, args0.port, args0.artifacts)
	sys.exit(run(show_address, client))


if __name__ == '__main__':
	main()
