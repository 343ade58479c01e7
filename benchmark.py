import argparse
import os
import time
import numpy as np
from tqdm import tqdm
from veb import VEB


def generate_keys(universe, num_keys, seed):
    """
    Draw distinct random keys from the universe
    Input:
        universe (int): The universe size of the tree
        num_keys (int): The number of keys to draw, clipped to the universe size
        seed (int): Seed of the random generator
    Output:
        keys (list): Sorted list of distinct python integers
    """
    rng = np.random.default_rng(seed)
    num_keys = min(num_keys, universe)
    keys = rng.choice(universe, size=num_keys, replace=False)
    return [int(k) for k in np.sort(keys)]


def build_tree(universe, keys):
    """
    Create a tree of the given universe size and insert every key
    """
    veb = VEB(universe)
    for k in keys:
        veb.insert(k)
    return veb


def neighbour_walk(tree, query, pre_step, succ_step):
    """
    Walk backward and forward from the query index
    Input:
        tree (VEB): The tree to search
        query (int): Starting point, does not have to be a member
        pre_step (int): The number of steps in the backward walk
        succ_step (int): The number of steps in the forward walk
    Output:
        pre_res (list): Predecessors in the order they were visited
        succ_res (list): Successors in the order they were visited
    """
    # Backward search
    pre_res = []
    pre_prev = query
    while len(pre_res) < pre_step:
        pre = tree.predecessor(pre_prev)
        if pre is None:
            break
        pre_res.append(pre)
        pre_prev = pre

    # Forward search
    succ_res = []
    succ_prev = query
    while len(succ_res) < succ_step:
        succ = tree.successor(succ_prev)
        if succ is None:
            break
        succ_res.append(succ)
        succ_prev = succ
    return pre_res, succ_res


def run(args):
    universe = 1 << args.universe_bits
    print("Universe size of veb tree:", universe)
    keys = generate_keys(universe, args.num_keys, args.seed)
    rng = np.random.default_rng(args.seed + 1)
    queries = [int(q) for q in rng.integers(0, universe, size=args.num_queries)]

    t_start = time.time()
    veb = VEB(universe)
    t_alloc = time.time() - t_start
    print("Allocating the tree takes {}".format(t_alloc))

    t_start = time.time()
    for k in tqdm(keys, desc="insert"):
        veb.insert(k)
    t_insert = time.time() - t_start
    print("Inserting {} keys takes {}".format(len(keys), t_insert))

    t_start = time.time()
    hits = 0
    for q in tqdm(queries, desc="member"):
        if veb.member(q):
            hits += 1
    t_member = time.time() - t_start
    print("{} membership queries ({} hits) take {}".format(len(queries), hits, t_member))

    t_start = time.time()
    visited = 0
    for q in tqdm(queries, desc="walk"):
        pre_res, succ_res = neighbour_walk(veb, q, args.pre_step, args.succ_step)
        visited += len(pre_res) + len(succ_res)
    t_walk = time.time() - t_start
    print("Neighbour walks visit {} keys and take {}".format(visited, t_walk))

    t_start = time.time()
    for k in tqdm(keys, desc="delete"):
        veb.delete(k)
    t_delete = time.time() - t_start
    print("Deleting {} keys takes {}".format(len(keys), t_delete))
    if not veb.is_empty():
        raise RuntimeError("Tree is not empty after deleting every key: " + repr(veb))

    timings = {'alloc': t_alloc, 'insert': t_insert, 'member': t_member,
               'walk': t_walk, 'delete': t_delete}
    if args.speed_record_path is not None:
        if not os.path.exists(args.speed_record_path):
            os.makedirs(args.speed_record_path)
        with open(os.path.join(args.speed_record_path, "speed_log.txt"), 'a') as fw:
            for name, t_elapse in timings.items():
                fw.write(name + "," + str(t_elapse) + "\n")
    print("Total takes: ", sum(timings.values()))
    veb.destroy()
    return timings


def main(argv=None):
    parser = argparse.ArgumentParser("Time the veb tree on random keys")
    parser.add_argument("--universe_bits", type=int, default=16,
                        help="The tree covers [0, 2 ** universe_bits)")
    parser.add_argument("--num_keys", type=int, default=10000,
                        help="The number of distinct keys to insert")
    parser.add_argument("--num_queries", type=int, default=1000,
                        help="The number of random query points")
    parser.add_argument("--pre_step", type=int, default=10,
                        help="The number of steps in the backward walk")
    parser.add_argument("--succ_step", type=int, default=10,
                        help="The number of steps in the forward walk")
    parser.add_argument("--seed", type=int, default=1,
                        help="Seed of the key and query generator")
    parser.add_argument("--speed_record_path", type=str, default=None,
                        help="Append the timings to speed_log.txt in this directory")
    args = parser.parse_args(argv)
    if args.universe_bits < 1:
        parser.error("--universe_bits must be at least 1")
    run(args)


if __name__ == "__main__":
    main()
