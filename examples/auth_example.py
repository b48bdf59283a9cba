#!/usr/bin/env python3
"""
Auth Example: Organization User Lifecycle

This example walks a user through sign up, sign in, token refresh and
sign out for an organization.

Requirements:
- AUTH0_DOMAIN, AUTH0_CLIENT_ID, AUTH0_CLIENT_SECRET
- AUTH0_M2M_CLIENT_ID, AUTH0_M2M_CLIENT_SECRET
- SUPABASE_URL, SUPABASE_ANON_KEY
- CAVOS_ORG_ID and CAVOS_ORG_SECRET for the organization
"""

import asyncio
import logging
import os
from pathlib import Path
import sys

# Add the src directory to the path so we can import the SDK modules
project_dir = Path(__file__).parent.parent
src_dir = project_dir / "src"
sys.path.insert(0, str(src_dir))

from cavos_sdk.auth import CavosAuth
from cavos_sdk.core.config import CavosConfig
from cavos_sdk.core.exceptions import AuthFlowError, ConfigurationError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def example_lifecycle(org_id: str, org_secret: str, email: str, password: str):
    """Sign up, sign in, refresh and sign out one user."""
    print("\n=== User Lifecycle Example ===")

    async with CavosAuth(CavosConfig.from_env()) as auth:
        try:
            user = await auth.sign_up(email, password, org_id, network="sepolia")
            print(f"✅ Signed up {user['user_id']} with wallet {user['wallet']['address']}")
        except AuthFlowError as e:
            if "already exists" not in str(e):
                raise
            print("User already exists, signing in")

        session = await auth.sign_in(email, password, org_id)
        print(f"✅ Signed in as {session['user']['email']}")
        print(f"   Wallet: {session['wallet']['address']}")
        print(f"   External wallet: {session['external_wallet']}")

        # The SDK keeps no session state; store and refresh tokens yourself
        refreshed = await auth.refresh_token(session['user']['refresh_token'], org_secret)
        print(f"✅ Refreshed tokens, expires in {refreshed.get('expires_in')}s")

        result = await auth.sign_out(session['user']['access_token'])
        print(f"✅ {result['message']}")


async def main():
    """Run the auth example."""
    print("🚀 Cavos SDK Auth Example")
    print("=" * 50)

    org_id = os.environ.get('CAVOS_ORG_ID')
    org_secret = os.environ.get('CAVOS_ORG_SECRET')
    if not org_id or not org_secret:
        print("Set CAVOS_ORG_ID and CAVOS_ORG_SECRET to run this example")
        return

    try:
        await example_lifecycle(org_id, org_secret, "demo@example.com", "Demo-Passw0rd!")
    except ConfigurationError as e:
        print(f"\n❌ Missing configuration: {e}")
    except AuthFlowError as e:
        print(f"\n❌ {e}")
        logger.exception("Example execution failed")


if __name__ == "__main__":
    asyncio.run(main())
