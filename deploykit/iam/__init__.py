"""IAM policy documents and the runner's inline policy maintenance."""