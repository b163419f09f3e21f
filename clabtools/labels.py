"""Label names attached to lab containers."""

CONTAINERLAB = "containerlab"
NODE_NAME = "clab-node-name"
NODE_KIND = "clab-node-kind"
NODE_TYPE = "clab-node-type"
NODE_GROUP = "clab-node-group"
NODE_LAB_DIR = "clab-node-lab-dir"
TOPO_FILE = "clab-topo-file"
NODE_MGMT_NET_BR = "clab-mgmt-net-bridge"