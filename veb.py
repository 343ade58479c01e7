class UniverseSizeError(ValueError):
    """
    Raised when a tree is requested for a universe size it cannot represent
    """


class OutOfBoundsError(IndexError):
    """
    Raised when insert or delete receives a value outside [0, u).
    The tree is left untouched.
    """


class VEB:
    """
    van Emde Boas tree over the universe [0, u)
    Attributes:
        u (int): The universe size, a power of two >= 2
        min (int): Smallest member, None when empty. Never stored in a cluster
        max (int): Largest member, None when empty
        lower_sqrt (int): Size of every cluster
        upper_sqrt (int): Number of clusters and size of the summary
        summary (VEB): Tree over the indices of non-empty clusters
        clusters (list): upper_sqrt trees of size lower_sqrt
    """

    def high(self, x):
        return x // self.lower_sqrt

    def low(self, x):
        return x % self.lower_sqrt

    def index(self, x, y):
        return x * self.lower_sqrt + y

    def __init__(self, u):
        """
        Build the whole skeleton eagerly, every cluster at every level
        Input:
            u (int): The universe size
        Output: None
        """
        if not isinstance(u, int) or isinstance(u, bool):
            raise UniverseSizeError("u must be an integer --- u = " + repr(u))
        if u < 2:
            raise UniverseSizeError("u must be at least 2 --- u = " + str(u))
        if u & (u - 1) != 0:
            raise UniverseSizeError("u must be a power of two --- u = " + str(u))
        self.u = u
        self.min = None
        self.max = None
        if u > 2:
            lg = u.bit_length() - 1
            half = lg // 2
            self.lower_sqrt = 1 << half
            self.upper_sqrt = 1 << (lg - half)
            self.summary = VEB(self.upper_sqrt)
            self.clusters = [VEB(self.lower_sqrt) for i in range(self.upper_sqrt)]
        else:
            self.lower_sqrt = self.upper_sqrt = 0
            self.summary = None
            self.clusters = None

    def _check_bounds(self, x):
        if x < 0 or x >= self.u:
            raise OutOfBoundsError("Value {} out of bounds (u = {})".format(x, self.u))

    def member(self, x):
        if x < 0 or x >= self.u:
            return False
        if x == self.min or x == self.max:  # found it as the minimum or maximum
            return True
        elif self.u <= 2:  # has not found it in the "leaf"
            return False
        else:
            return self.clusters[self.high(x)].member(self.low(x))

    def __contains__(self, x):
        return self.member(x)

    def minimum(self):
        return self.min

    def maximum(self):
        return self.max

    def is_empty(self):
        return self.min is None

    def successor(self, x):
        """
        Smallest member strictly greater than x, None if there is none.
        x does not have to be a member.
        """
        if self.min is None or x >= self.max:
            return None
        elif x < self.min:  # x is less than everything in the tree
            return self.min
        elif self.u <= 2:
            if x == 0 and self.max == 1:
                return 1
            else:
                return None
        else:
            h = self.high(x)
            l = self.low(x)
            cluster = self.clusters[h]
            if cluster.max is not None and l < cluster.max:
                offset = cluster.successor(l)
                return self.index(h, offset)
            else:
                succcluster = self.summary.successor(h)
                if succcluster is None:
                    return None
                else:
                    return self.index(succcluster, self.clusters[succcluster].min)

    def predecessor(self, x):
        """
        Largest member strictly smaller than x, None if there is none.
        x does not have to be a member.
        """
        if self.min is None or x <= self.min:
            return None
        elif x > self.max:
            return self.max
        elif self.u <= 2:
            if x == 1 and self.min == 0:
                return 0
            else:
                return None
        else:
            h = self.high(x)
            l = self.low(x)
            cluster = self.clusters[h]
            if cluster.min is not None and l > cluster.min:
                offset = cluster.predecessor(l)
                return self.index(h, offset)
            else:
                predcluster = self.summary.predecessor(h)
                if predcluster is None:
                    # min lives only at this level
                    if x > self.min:
                        return self.min
                    else:
                        return None
                else:
                    return self.index(predcluster, self.clusters[predcluster].max)

    def emptyInsert(self, x):
        self.min = x
        self.max = x

    def insert(self, x):
        """
        Add x to the set, nothing happens if it is already there
        Input:
            x (int): Value in [0, u)
        Output: None
        """
        self._check_bounds(x)
        if self.member(x):
            return
        self._insert(x)

    def _insert(self, x):
        if self.min is None:
            self.emptyInsert(x)
            return
        if x < self.min:
            temp = self.min
            self.min = x
            x = temp
        if self.u > 2:
            h = self.high(x)
            cluster = self.clusters[h]
            if cluster.min is None:
                self.summary._insert(h)
                cluster.emptyInsert(self.low(x))
            else:
                cluster._insert(self.low(x))
        if x > self.max:
            self.max = x

    def delete(self, x):
        """
        Remove x from the set, nothing happens if it is absent
        Input:
            x (int): Value in [0, u)
        Output: None
        """
        self._check_bounds(x)
        if not self.member(x):
            return
        self._delete(x)

    def _delete(self, x):
        if self.min == self.max:
            self.min = None
            self.max = None
            return
        if self.u == 2:
            # the other element is the only one left
            self.min = self.max = 1 if x == 0 else 0
            return
        if x == self.min:
            # pull the next smallest value up out of its cluster
            first = self.summary.min
            x = self.index(first, self.clusters[first].min)
            self.min = x
        h = self.high(x)
        cluster = self.clusters[h]
        cluster._delete(self.low(x))
        if cluster.min is None:
            self.summary._delete(h)
            if x == self.max:
                summary_max = self.summary.max
                if summary_max is None:
                    self.max = self.min
                else:
                    self.max = self.index(summary_max, self.clusters[summary_max].max)
        elif x == self.max:
            self.max = self.index(h, cluster.max)

    def destroy(self):
        """
        Tear down the children post-order. The node is unusable afterwards
        except for further destroy calls.
        """
        if self.clusters is not None:
            for cluster in self.clusters:
                cluster.destroy()
            self.clusters = None
        if self.summary is not None:
            self.summary.destroy()
            self.summary = None
        self.min = None
        self.max = None

    def __iter__(self):
        x = self.min
        while x is not None:
            yield x
            x = self.successor(x)

    def __repr__(self):
        return "VEB(u={}, min={}, max={})".format(self.u, self.min, self.max)


def create(u):
    return VEB(u)


def destroy(tree):
    if tree is None:
        return
    tree.destroy()
