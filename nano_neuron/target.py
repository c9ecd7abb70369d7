def celsius_to_fahrenheit(c):
    """
    The reference function our NanoNeuron tries to imitate: f = 1.8 * c + 32.
        We only use it to label the data sets, the model never sees w=1.8 and b=32 directly.
    """
    w = 1.8
    b = 32
    return c * w + b
