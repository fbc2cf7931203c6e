def chunks(data, size=4):
    """ Split a buffer into size-sized chunks, keeping the short tail """
    for i in range(0, len(data), size):
        yield data[i : i + size]
