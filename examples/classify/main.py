import logging
import os

import numpy as np

from ffnet import NetworkConfig, NeuralNetwork, accuracy
from ffnet.core.logger import setup_logging
from ffnet.data import generate_data, load
from ffnet.util.formatting import format_matrix, format_network
from ffnet.util.prompt import prompt_hyperparameters


setup_logging(level=logging.INFO)

random_state = np.random.RandomState(1234)

# Create a toy dataset ########################################################

data_filename = 'trainingData.csv'

if not os.path.exists(data_filename):
    generate_data(data_filename, n_samples=100, random_state=random_state)

inputs, labels = load(data_filename, n_input=4, n_output=3)

# Set up the network and train it #############################################

n_hidden, bias = prompt_hyperparameters()
print()

nnet = NeuralNetwork(
    NetworkConfig(n_hidden=n_hidden, n_input=4, n_output=3,
                  epochs=100, learning_rate=0.1),
    random_state=random_state)

nnet.train(inputs, labels, bias)

# Score on the same data ######################################################

outputs = nnet.predict(inputs)

print(format_network(nnet))
print()
print(format_matrix("outputs", outputs))
print("\nFinal accuracy:", accuracy(outputs, labels))
