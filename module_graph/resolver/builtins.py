"""Names of the modules Node ships with."""

from __future__ import annotations

NODE_BUILTINS: frozenset[str] = frozenset({
    "assert", "assert/strict", "async_hooks", "buffer", "child_process",
    "cluster", "console", "constants", "crypto", "dgram",
    "diagnostics_channel", "dns", "dns/promises", "domain", "events", "fs",
    "fs/promises", "http", "http2", "https", "inspector", "module", "net",
    "os", "path", "path/posix", "path/win32", "perf_hooks", "process",
    "punycode", "querystring", "readline", "readline/promises", "repl",
    "stream", "stream/consumers", "stream/promises", "stream/web",
    "string_decoder", "sys", "timers", "timers/promises", "tls",
    "trace_events", "tty", "url", "util", "util/types", "v8", "vm", "wasi",
    "worker_threads", "zlib",
})

# Only reachable through the "node:" scheme
NODE_PREFIX_ONLY: frozenset[str] = frozenset({"sea", "sqlite", "test", "test/reporters"})


def is_node_builtin(name: str) -> bool:
    if name.startswith("node:"):
        bare = name[len("node:"):]
        return bare in NODE_BUILTINS or bare in NODE_PREFIX_ONLY
    return name in NODE_BUILTINS
