"""Test configuration and utilities for Cavos SDK."""

import logging
import sys
from pathlib import Path

# Add the src directory to the path so we can import the SDK modules
test_dir = Path(__file__).parent
project_dir = test_dir.parent
src_dir = project_dir / "src"
sys.path.insert(0, str(src_dir))

# Configure logging for tests
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

# Suppress noisy logs during testing
logging.getLogger('aiohttp').setLevel(logging.WARNING)
logging.getLogger('httpx').setLevel(logging.WARNING)

# Test configuration
TEST_CONFIG = {
    'auth0_domain': 'test-domain.auth0.com',
    'auth0_client_id': 'test-client-id',
    'auth0_client_secret': 'test-client-secret',
    'auth0_m2m_client_id': 'test-m2m-client-id',
    'auth0_m2m_client_secret': 'test-m2m-client-secret',
    'supabase_url': 'https://test.supabase.co',
    'supabase_anon_key': 'test-anon-key',
    'request_timeout': 5.0,
}
