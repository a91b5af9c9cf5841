"""JSON-RPC error codes, methods, envelopes and an HTTP client for Tendermint nodes."""