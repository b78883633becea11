"""Short worked examples of the concepts the exercises practise, one module per topic."""