'''restfetch: fetch JSON from REST endpoints and decode it into typed records.'''

__version__ = '0.1.0'
