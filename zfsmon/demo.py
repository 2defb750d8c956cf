"""
Fixture data for demo mode.

Captured from a mirrored pool with an L2ARC device and a mirrored log.
"""

from .constants import (
    ARCSTATS_PATH,
    ARCSTAT_COMMAND,
    ZPOOL_COMMAND,
    ZPOOL_IOSTAT_ARGS,
    ZPOOL_LIST_ARGS,
    ZPOOL_STATUS_ARGS,
)

ARCSTATS = """\
13 1 0x01 147 39984 4312578125 291847261873829
name                            type data
hits                            4    8876543210
misses                          4    412345678
demand_data_hits                4    3245678901
demand_data_misses              4    98765432
size                            4    49720066048
c                               4    49910562816
c_min                           4    3119410176
c_max                           4    49910562816
read_ops                        4    1247
l2_hits                         4    23456789
l2_misses                       4    34567890
l2_read_bytes                   4    1288490188800
l2_write_bytes                  4    2199023255552
l2_size                         4    479961088000
l2_asize                        4    461708902400
"""

ZPOOL_STATUS = """\
  pool: data
 state: ONLINE
  scan: scrub repaired 0B in 00:00:02 with 0 errors on Sun Sep 14 16:00:03 2025
config:

\tNAME        STATE     READ WRITE CKSUM
\tdata        ONLINE       0     0     0
\t  mirror-0  ONLINE       0     0     0
\t    ata-WDC_WD80EMAZ-00WJTA0_9RK3VYJD  ONLINE       0     0     0
\t    ata-WDC_WD80EMAZ-00WJTA0_9RK8VYJD  ONLINE       0     0     0
\tlogs
\t  mirror-1  ONLINE       0     0     0
\t    ata-Samsung_SSD_860_EVO_250GB_S3YJNX0N1234567  ONLINE       0     0     0
\t    ata-Samsung_SSD_860_EVO_250GB_S3YJNX0N7654321  ONLINE       0     0     0
\tcache
\t  nvme-Samsung_SSD_970_EVO_500GB_S466NX0M123456  ONLINE       0     0     0

errors: No known data errors
"""

ZPOOL_IOSTAT = """\
                                                     capacity     operations     bandwidth
pool                                               alloc   free   read  write   read  write
-------------------------------------------------  -----  -----  -----  -----  -----  -----
data                                               4.21T  3.07T    118     96  14.2M  21.5M
  mirror-0                                         4.21T  3.07T    118     73  14.2M  9.50M
    ata-WDC_WD80EMAZ-00WJTA0_9RK3VYJD                  -      -     59     36  7.10M  4.75M
    ata-WDC_WD80EMAZ-00WJTA0_9RK8VYJD                  -      -     59     37  7.10M  4.75M
logs                                                   -      -      -      -      -      -
  mirror-1                                          384M   232G      0     23      0  12.0M
    ata-Samsung_SSD_860_EVO_250GB_S3YJNX0N1234567      -      -      0     12      0  6.00M
    ata-Samsung_SSD_860_EVO_250GB_S3YJNX0N7654321      -      -      0     11      0  6.00M
cache                                                  -      -      -      -      -      -
  nvme-Samsung_SSD_970_EVO_500GB_S466NX0M123456     447G  18.5G     42      9  5.25M  1.12M
-------------------------------------------------  -----  -----  -----  -----  -----  -----
"""

ZPOOL_LIST = "boot-pool\ndata\nusb-backup\n"

ARCSTAT_FIELDS = """\
 hit%  miss%  read  arcsz      c
100.0    0.0  1247  49720066048  49910562816
"""

ARCSTAT_DEFAULT = """\
    time  read  miss  miss%  dmis  dm%  pmis  pm%  mmis  mm%  size     c  avail
16:02:11  1247     0      0     0    0     0    0     0    0   46G   46G   2.1G
"""

COMMAND_RESPONSES = {
    (ZPOOL_COMMAND, *ZPOOL_STATUS_ARGS): ZPOOL_STATUS,
    (ZPOOL_COMMAND, *ZPOOL_IOSTAT_ARGS): ZPOOL_IOSTAT,
    (ZPOOL_COMMAND, *ZPOOL_LIST_ARGS): ZPOOL_LIST,
    (ARCSTAT_COMMAND, "-f", "hit%,miss%,read,arcsz,c", "1", "1"): ARCSTAT_FIELDS,
    (ARCSTAT_COMMAND, "1", "1"): ARCSTAT_DEFAULT,
}

FILES = {
    ARCSTATS_PATH: ARCSTATS,
}
