# netlab

A toolkit of classic computer-networks exercises, written as plain Python
functions, with a small command-line front end for the error-control and
framing tools. It has no dependencies beyond the standard library.

## Modules

- `netlab.crc`: CRC by modulo-2 division. `mod2div(dividend, divisor)`
  returns the remainder, `encode(data, key)` appends it to the data, and
  `has_error(received, key)` reports a non-zero remainder. `CRC_12`
  (`1100000001111`) and `CRC_16` (`11000000000000101`) are provided as keys;
  any bit string works.
- `netlab.checksum`: an 8-bit one's-complement checksum over bytes or text
  (`byte_checksum`, `verify_byte_checksum`) and a checksum over two 4-bit
  binary words (`binary_sum`, `ones_complement`, `nibble_checksum`,
  `verify_nibble_checksum`).
- `netlab.hamming`: even-parity Hamming codes. `encode74` and `check74`
  handle the (7,4) code; `parity_bit_count`, `encode` and
  `detect_and_correct` handle any number of data bits. Checks return a
  `CheckResult(position, corrected)`, with position 0 when there is no error.
- `netlab.stuffing`: HDLC-style bit stuffing (`bit_stuff`, `bit_destuff`)
  and word-level byte stuffing with `flag` and `esc` markers (`byte_stuff`,
  `byte_destuff`).
- `netlab.framing`: character-count framing (`char_count_frame`,
  `char_count_deframe`); frame sizes run from 2 to 10.
- `netlab.line_coding`: `nrz_l` and `nrz_i` return `Level.HIGH`/`Level.LOW`
  values; `manchester` and `differential_manchester` return two-character
  symbols such as `"10"`.
- `netlab.routing`: `distance_vector(cost)` builds a `RoutingTable` of
  `Route` entries from a cost matrix (`INF` = 9999 or `None` means no link);
  `RoutingTable.path` and `RoutingTable.render` show paths and tables.
  `dijkstra(graph, source)` works on an adjacency matrix where 0 means no
  edge and returns `ShortestPaths(distances, parents)`; `path_to` follows
  the parent links.
- `netlab.arq`: `go_back_n(total, window, rng)` yields `WindowRound`
  records, losing a window one time in five; `stop_and_wait(frames, rng)`
  yields `StopAndWaitEvent` records, losing an ACK one time in four. Pass a
  seeded `random.Random` for repeatable runs, or leave `rng` out.
- `netlab.compute`: `calculate`, `quadratic_roots`, `search` and
  `bubble_sort`, each with a `handle_*` server function and a `request_*`
  client function that exchange 32-bit little-endian values.
- `netlab.messaging`: echo (`handle_echo`, `echo`), TCP and UDP greetings
  (`handle_hello`, `hello`, `handle_udp_hello`, `udp_hello`), chat
  (`relay_incoming`, `chat`) and file transfer (`handle_upload`, `upload`,
  `handle_download`, `download`). Served file names may not contain a
  directory.
- `netlab.appproto`: a fixed DNS table (`resolve`, `handle_dns`,
  `query_dns`), a DHCP lease of `192.168.1.100` (`handle_dhcp`,
  `dhcp_lease`), a minimal SMTP session (`smtp_reply`, `handle_smtp`,
  `send_mail`) and an FTP greeting (`handle_ftp`, `ftp_greeting`).

## Examples

```python
from netlab import checksum, crc, hamming, stuffing

frame = crc.encode("100100", "1101")
print(frame)                          # 100100001
print(crc.has_error(frame, "1101"))   # False

print(stuffing.bit_stuff("0111111"))  # 01111101

print(checksum.binary_sum("1010", "0101"))  # 1111
print(checksum.ones_complement("1111"))     # 0000

code = hamming.encode74([1, 0, 1, 1])       # [0, 1, 1, 0, 0, 1, 1]
code[4] ^= 1
print(hamming.check74(code).position)       # 5
```

The socket functions take a socket that is already connected or bound, so a
`socket.socketpair()` is enough to try them:

```python
import socket
import threading
from netlab import compute

server, client = socket.socketpair()
worker = threading.Thread(target=compute.handle_sort, args=(server,))
worker.start()
print(compute.request_sort(client, [5, 3, 9, 1]))  # [1, 3, 5, 9]
worker.join()
```

## Command line

Installing the package provides the `netlab` command:

```
netlab crc-encode 100100 --key 1101
netlab crc-check 100100001 --poly crc12
netlab bit-stuff 0111111
netlab bit-destuff 01111101
netlab byte-stuff hello flag world
netlab byte-destuff flag hello esc flag world flag
netlab frame abcdefg 4
netlab deframe 4abc4def2g
netlab checksum 1010 0101
netlab checksum-verify 1010 0101 0000
```

`crc-encode` and `crc-check` need either `--poly crc12|crc16` or `--key`.
The checking commands exit with status 1 when an error is detected; invalid
input exits with status 2.

## What it does not do

- There are no server or client commands. The socket services are functions
  that serve or request a single exchange; opening, binding, listening and
  accepting sockets is left to the caller.
- Hamming codes, line coding, routing and the ARQ simulations are available
  only from Python, not from the command line.
- The DNS, DHCP, SMTP and FTP pieces are fixed toy exchanges, not real
  protocol implementations.

## Running the tests

```
pip install -e ".[test]"
pytest
```