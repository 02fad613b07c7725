#!/usr/bin/env python3

# Copyright (c) 2024 Anthony Towns
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.

import argparse
import hashlib
import os
import shutil
import subprocess
import sys
import time

import sha1

def timed(desc, fn, size, out=sys.stdout):
    start = time.perf_counter()
    r = fn()
    secs = time.perf_counter() - start
    if secs > 0:
        print(f"{desc}: {size / secs / 1000000:.2f} MB/s", file=out)
    else:
        print(f"{desc}: too fast to measure", file=out)
    return r

def pure_sha1(data, chunk_size):
    h = sha1.hasher()
    for i in range(0, len(data), chunk_size):
        h.update(data[i:i+chunk_size])
    return h.hexdigest()

def sha1sum(data):
    p = subprocess.run(["sha1sum"], input=data, stdout=subprocess.PIPE, check=True)
    return p.stdout.split()[0].decode('ascii')

def main(argv=None, stdin=None, out=sys.stdout):
    parser = argparse.ArgumentParser(prog="sha1bench",
        description="Hash FILE (or stdin) with pure-python sha1 and compare throughput.")
    parser.add_argument("file", nargs="?", help="input file, default stdin")
    parser.add_argument("--chunk-size", type=int, default=4096,
                        help="bytes passed to each update() call")
    args = parser.parse_args(argv)

    if args.chunk_size <= 0:
        parser.error("--chunk-size must be positive")

    if args.file is None:
        data = (stdin if stdin is not None else sys.stdin.buffer).read()
    else:
        with open(args.file, "rb") as f:
            data = f.read()

    print(pure_sha1(data, args.chunk_size), file=out)

    timed("sha1.py", lambda: pure_sha1(data, args.chunk_size), len(data), out)
    timed("hashlib", lambda: hashlib.sha1(data).hexdigest(), len(data), out)

    if os.environ.get("WITHOUT_SHA1SUM") != "1":
        if shutil.which("sha1sum") is None:
            print("sha1sum program not found, skipping", file=sys.stderr)
        else:
            timed("sha1sum program", lambda: sha1sum(data), len(data), out)

    return 0

if __name__ == "__main__":
    sys.exit(main())
