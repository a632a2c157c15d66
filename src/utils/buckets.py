def classify_into_buckets(items, classify, templates):
    """Sort items into named buckets and render one line per non-empty bucket.

    `classify` is called once per item, in order, and returns a bucket name
    (it may also apply the item's side effect). `templates` maps every bucket
    name to a template with a `{users}` field; lines follow its order and list
    the bucket's items in input order.
    """
    buckets = {name: [] for name in templates}
    for item in items:
        buckets[classify(item)].append(item)
    return "".join(
        templates[name].format(users=", ".join(members))
        for name, members in buckets.items()
        if members
    )
